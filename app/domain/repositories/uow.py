from abc import ABC, abstractmethod
from typing import TypeVar

from .file_repository import FileRepository
from .user_repository import UserRepository

T = TypeVar("T", bound="IUnitOfWork")


class IUnitOfWork(ABC):
    """文件与账户仓储共用的工作单元

    每次进入上下文都对应一个独立的事务，正常退出时提交，抛出异常时回滚。
    """

    file: FileRepository
    user: UserRepository

    @abstractmethod
    async def commit(self):
        ...

    @abstractmethod
    async def rollback(self):
        ...

    @abstractmethod
    async def __aenter__(self: T) -> T:
        """开启事务并初始化file/user仓储"""
        ...

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """提交或回滚事务，提交失败需要继续向上抛出"""
        ...
