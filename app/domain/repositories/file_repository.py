from typing import List, Optional, Protocol

from app.domain.models.file import File


class FileRepository(Protocol):
    """文件模型数据仓库"""

    async def create(self, file: File) -> File:
        """新增文件记录，返回带有持久层分配id的文件信息"""
        ...

    async def get_by_id(self, file_id: str, user_id: Optional[str] = None) -> Optional[File]:
        """根据文件id获取文件信息，传递user_id时只查询该用户的文件"""
        ...

    async def list_by_parent(
        self, user_id: str, parent_id: str, skip: int = 0, limit: int = 20
    ) -> List[File]:
        """按id倒序分页查询用户在指定父级(存储层表示)下的文件"""
        ...

    async def update_public(self, file_id: str, user_id: str, is_public: bool) -> None:
        """更新用户文件的公开状态"""
        ...

    async def count(self) -> int:
        """统计文件总数"""
        ...
