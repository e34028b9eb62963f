import base64
import binascii
import logging
import mimetypes
import re
from typing import Any, Callable, List, Optional

from app.application.errors.exceptions import (
    InvalidOperationError,
    NotFoundError,
    ValidationError,
)
from app.domain.external.file_storage import FileStorage
from app.domain.external.job_queue import JobQueue
from app.domain.models.file import (
    MAX_FILES_PER_PAGE,
    ROOT_PARENT_ID,
    File,
    FileType,
    is_root_parent,
)
from app.domain.models.file_content import FileContent
from app.domain.models.identifier import sanitize_id
from app.domain.repositories.uow import IUnitOfWork

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "text/plain"
_SIZE_VARIANT_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


class FileService:
    """文件层级与访问控制服务"""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        file_storage: FileStorage,
        job_queue: JobQueue,
    ) -> None:
        """构造函数，完成文件服务的初始化"""
        self.file_storage = file_storage
        self.job_queue = job_queue
        self._uow_factory = uow_factory
        self._uow = uow_factory()

    async def upload_file(
        self,
        user_id: str,
        name: Any,
        file_type: Any,
        parent_id: Any = None,
        is_public: Any = False,
        data: Any = None,
    ) -> File:
        """校验并创建文件/文件夹，非文件夹类型会先把内容写入磁盘再记录元数据

        请求字段未经类型校验直接传入，按固定顺序逐项检查，is_public按真值处理。

        Raises:
            ValidationError: 缺少字段、父级不存在或父级不是文件夹
        """
        # 1.校验请求字段
        if not name:
            raise ValidationError("Missing name")
        parsed_type = FileType.parse(file_type)
        if parsed_type is None:
            raise ValidationError("Missing type")
        if not data and parsed_type != FileType.FOLDER:
            raise ValidationError("Missing data")

        # 2.校验父级必须存在且为文件夹
        parent = None
        if not is_root_parent(parent_id):
            async with self._uow:
                parent = await self._uow.file.get_by_id(
                    sanitize_id(str(parent_id)), user_id=user_id
                )
            if not parent:
                raise ValidationError("Parent not found")
            if not parent.is_folder():
                raise ValidationError("Parent is not a folder")

        content = None
        if parsed_type != FileType.FOLDER:
            content = self._decode_data(data)

        # 3.先写入磁盘再写入元数据
        await self.file_storage.ensure_root()
        file = File(
            user_id=user_id,
            name=str(name),
            type=parsed_type,
            is_public=bool(is_public),
            parent_id=parent.id if parent else None,
        )
        if content is not None:
            file.local_path = await self.file_storage.write(content)

        try:
            async with self._uow:
                file = await self._uow.file.create(file)
        except Exception:
            if file.local_path:
                logger.error(f"文件元数据写入失败，清理已落盘的文件: {file.local_path}")
                await self.file_storage.remove(file.local_path)
            raise
        logger.info(f"文件创建成功: {file.name} (ID: {file.id}, 类型: {file.type.value})")

        # 4.图片需要投递缩略图生成任务
        if file.type == FileType.IMAGE:
            job_name = f"Image thumbnail [{user_id}-{file.id}]"
            await self.job_queue.enqueue(job_name, {"userId": user_id, "fileId": file.id})
            logger.info(f"缩略图任务投递成功: {job_name}")

        return file

    @staticmethod
    def _decode_data(data: Any) -> bytes:
        """解码base64格式的文件内容，缺失的=填充会自动补齐"""
        if not isinstance(data, str):
            raise ValidationError("Invalid data")
        try:
            return base64.b64decode(data + "=" * (-len(data) % 4))
        except (binascii.Error, ValueError):
            raise ValidationError("Invalid data")

    async def get_file(self, file_id: str, user_id: str) -> File:
        """获取当前用户的文件信息"""
        async with self._uow:
            file = await self._uow.file.get_by_id(sanitize_id(file_id), user_id=user_id)
        if not file:
            raise NotFoundError()
        return file

    async def list_files(
        self, user_id: str, parent_id: Any = None, page: Any = None
    ) -> List[File]:
        """分页获取当前用户在指定父级下的文件，按创建顺序倒序，每页最多20条

        非法的父级id不会报错，只会查询不到数据。
        """
        storage_parent_id = (
            ROOT_PARENT_ID if is_root_parent(parent_id) else sanitize_id(str(parent_id))
        )
        page_number = self._parse_page(page)

        async with self._uow:
            return await self._uow.file.list_by_parent(
                user_id=user_id,
                parent_id=storage_parent_id,
                skip=page_number * MAX_FILES_PER_PAGE,
                limit=MAX_FILES_PER_PAGE,
            )

    @staticmethod
    def _parse_page(page: Any) -> int:
        """页码只接受非负整数，其余一律按第0页处理"""
        if isinstance(page, int) and not isinstance(page, bool):
            return page if page >= 0 else 0
        if isinstance(page, str) and page.isascii() and page.isdigit():
            return int(page)
        return 0

    async def set_public(self, file_id: str, user_id: str, is_public: bool) -> File:
        """修改当前用户文件的公开状态并返回修改后的文件信息"""
        file_id = sanitize_id(file_id)
        async with self._uow:
            file = await self._uow.file.get_by_id(file_id, user_id=user_id)
            if not file:
                raise NotFoundError()
            await self._uow.file.update_public(file_id, user_id, is_public)

        file.is_public = is_public
        return file

    async def publish(self, file_id: str, user_id: str) -> File:
        return await self.set_public(file_id, user_id, True)

    async def unpublish(self, file_id: str, user_id: str) -> File:
        return await self.set_public(file_id, user_id, False)

    async def get_content(
        self, file_id: str, user_id: Optional[str] = None, size: Optional[str] = None
    ) -> FileContent:
        """解析文件内容，公开文件任何人可读，私有文件只有所有者可读

        Raises:
            NotFoundError: 文件不存在、无权访问或者对应尺寸的文件不存在
            InvalidOperationError: 文件夹没有内容
        """
        # 1.只按id查询，再根据公开状态/所有者判断是否可读
        async with self._uow:
            file = await self._uow.file.get_by_id(sanitize_id(file_id))
        if not file or not file.is_readable_by(user_id):
            raise NotFoundError()
        if file.is_folder():
            raise InvalidOperationError("A folder doesn't have content")

        # 2.拼接尺寸后缀，缩略图由外部worker按该约定生成
        path = file.local_path
        if size:
            if not _SIZE_VARIANT_PATTERN.match(size):
                raise NotFoundError()
            path = f"{file.local_path}_{size}"

        if not path or not await self.file_storage.exists(path):
            raise NotFoundError()

        mime_type, _ = mimetypes.guess_type(file.name)
        return FileContent(
            path=path,
            mime_type=mime_type or DEFAULT_MIME_TYPE,
            size=await self.file_storage.size(path),
        )
