import logging
import os
import uuid
from functools import partial
from typing import AsyncIterator

import anyio

from app.domain.external.file_storage import FileStorage

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class LocalFileStorage(FileStorage):
    """基于本地磁盘的文件内容存储，文件以随机uuid命名存放在根目录下

    磁盘操作都是阻塞调用，统一放到工作线程中执行，避免阻塞事件循环。
    """

    def __init__(self, root_dir: str) -> None:
        """构造函数，完成存储根目录的初始化"""
        self.root_dir = root_dir

    async def _run_sync(self, fn, /, *args, **kwargs):
        return await anyio.to_thread.run_sync(partial(fn, *args, **kwargs))

    async def ensure_root(self) -> None:
        await self._run_sync(os.makedirs, self.root_dir, exist_ok=True)

    async def write(self, data: bytes) -> str:
        """将字节写入根目录下新生成的文件中，文件名不使用用户传递的名字"""
        path = os.path.join(self.root_dir, str(uuid.uuid4()))
        await self._run_sync(self._write_bytes, path, data)
        logger.info(f"文件内容写入成功: {path} ({len(data)} 字节)")
        return path

    @staticmethod
    def _write_bytes(path: str, data: bytes) -> None:
        with open(path, "wb") as f:
            f.write(data)

    async def remove(self, path: str) -> None:
        try:
            await self._run_sync(os.remove, path)
        except FileNotFoundError:
            logger.warning(f"待删除的文件不存在: {path}")

    async def exists(self, path: str) -> bool:
        return await self._run_sync(os.path.isfile, path)

    async def size(self, path: str) -> int:
        return await self._run_sync(os.path.getsize, path)

    async def iter_bytes(self, path: str) -> AsyncIterator[bytes]:
        """分块读取文件内容"""
        async with await anyio.open_file(path, "rb") as f:
            while True:
                chunk = await f.read(CHUNK_SIZE)
                if not chunk:
                    break
                yield chunk
