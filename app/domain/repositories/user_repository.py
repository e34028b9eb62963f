"""账户仓储接口"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.models.user import User


class UserRepository(ABC):
    """账户仓储抽象接口，只覆盖注册、认证和统计需要的查询"""

    @abstractmethod
    async def create(self, user: User) -> User:
        """新增账户，返回带有持久层分配id的账户信息"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """根据会话令牌中记录的用户id查询账户"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """根据邮箱查询账户，用于注册查重以及Basic认证"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """账户总数，供/stats使用"""
        pass
