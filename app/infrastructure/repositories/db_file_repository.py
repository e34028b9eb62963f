from typing import List, Optional

from app.domain.models.file import File
from app.domain.repositories.file_repository import FileRepository
from app.infrastructure.models import FileModel
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession


class DBFileRepository(FileRepository):
    """基于数据库的文件数据仓库"""

    def __init__(self, db_session: AsyncSession) -> None:
        """构造函数，完成数据仓库初始化"""
        self.db_session = db_session

    async def create(self, file: File) -> File:
        """新增文件记录，刷新会话后由模型默认值分配id"""
        record = FileModel.from_domain(file)
        self.db_session.add(record)
        await self.db_session.flush()
        return record.to_domain()

    async def get_by_id(self, file_id: str, user_id: Optional[str] = None) -> Optional[File]:
        """根据传递的文件id获取文件信息"""
        # 1.构建查询条件，传递了user_id则限定所属用户
        stmt = select(FileModel).where(FileModel.id == file_id)
        if user_id is not None:
            stmt = stmt.where(FileModel.user_id == user_id)

        # 2.判断文件记录是否存在返回不同的值
        result = await self.db_session.execute(stmt)
        record = result.scalar_one_or_none()
        return record.to_domain() if record is not None else None

    async def list_by_parent(
        self, user_id: str, parent_id: str, skip: int = 0, limit: int = 20
    ) -> List[File]:
        """按id倒序分页查询用户在指定父级下的文件"""
        stmt = (
            select(FileModel)
            .where(FileModel.user_id == user_id, FileModel.parent_id == parent_id)
            .order_by(FileModel.id.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.db_session.execute(stmt)
        return [record.to_domain() for record in result.scalars().all()]

    async def update_public(self, file_id: str, user_id: str, is_public: bool) -> None:
        """更新用户文件的公开状态"""
        stmt = (
            update(FileModel)
            .where(FileModel.id == file_id, FileModel.user_id == user_id)
            .values(is_public=is_public)
        )
        await self.db_session.execute(stmt)

    async def count(self) -> int:
        """统计文件总数"""
        result = await self.db_session.execute(select(func.count()).select_from(FileModel))
        return result.scalar_one()
