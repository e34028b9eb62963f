from typing import AsyncIterator, Protocol


class FileStorage(Protocol):
    """文件内容存储协议，负责原始字节的落盘、探测与读取"""

    async def ensure_root(self) -> None:
        """确保存储根目录存在(递归创建，可重复调用)"""
        ...

    async def write(self, data: bytes) -> str:
        """将字节写入根目录下新生成的唯一文件名中，返回文件绝对路径"""
        ...

    async def remove(self, path: str) -> None:
        """删除指定路径的文件，文件不存在时忽略"""
        ...

    async def exists(self, path: str) -> bool:
        """判断指定路径的文件是否存在"""
        ...

    async def size(self, path: str) -> int:
        """获取指定路径文件的大小，单位为字节"""
        ...

    def iter_bytes(self, path: str) -> AsyncIterator[bytes]:
        """以分块的形式读取文件内容"""
        ...
