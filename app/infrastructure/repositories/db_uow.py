import asyncio
import logging
from typing import Optional

from app.domain.repositories.uow import IUnitOfWork
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .db_file_repository import DBFileRepository
from .db_user_repository import DBUserRepository

logger = logging.getLogger(__name__)


class DBUnitOfWork(IUnitOfWork):
    """基于Postgres会话的工作单元，每次进入上下文都会开启新的会话"""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory
        self.db_session: Optional[AsyncSession] = None

    async def commit(self):
        await self.db_session.commit()

    async def rollback(self):
        await self.db_session.rollback()

    async def __aenter__(self) -> "DBUnitOfWork":
        # 1.开启新的数据库会话
        self.db_session = self.session_factory()

        # 2.文件/账户仓储共用该会话
        self.file = DBFileRepository(db_session=self.db_session)
        self.user = DBUserRepository(db_session=self.db_session)

        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """有异常则回滚，否则提交

        提交失败时先回滚再继续向上抛出，上传流程依赖该异常清理已经落盘的文件。
        """
        try:
            if exc_type:
                await self.rollback()
            else:
                await self._commit_or_rollback()
        except asyncio.CancelledError:
            logger.warning("UoW提交/回滚操作被取消(可能是客户端断开连接)")
        finally:
            await self._close()

    async def _commit_or_rollback(self) -> None:
        try:
            await self.commit()
        except Exception as e:
            logger.error(f"UoW提交失败，执行回滚: {e}")
            await self.rollback()
            raise

    async def _close(self) -> None:
        try:
            await self.db_session.close()
        except asyncio.CancelledError:
            logger.warning("UoW关闭数据库会话被取消(可能是客户端断开连接)")
        except Exception as e:
            logger.warning(f"UoW关闭数据库会话失败: {e}")
