"""账户数据仓储的Postgres实现"""

from typing import Optional

from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.models.user import UserModel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


class DBUserRepository(UserRepository):
    """基于Postgres的账户仓储，email列带有唯一约束"""

    def __init__(self, db_session: AsyncSession) -> None:
        self.db_session = db_session

    async def _first(self, stmt: Select) -> Optional[User]:
        result = await self.db_session.execute(stmt)
        record = result.scalar_one_or_none()
        return record.to_domain() if record else None

    async def create(self, user: User) -> User:
        """写入账户记录并flush，使id/created_at等默认值立即可用"""
        record = UserModel.from_domain(user)
        self.db_session.add(record)
        await self.db_session.flush()
        return record.to_domain()

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return await self._first(select(UserModel).where(UserModel.id == user_id))

    async def get_by_email(self, email: str) -> Optional[User]:
        # 邮箱按原样精确匹配
        return await self._first(select(UserModel).where(UserModel.email == email))

    async def count(self) -> int:
        result = await self.db_session.execute(select(func.count(UserModel.id)))
        return result.scalar_one()
