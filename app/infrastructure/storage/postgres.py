import logging
from functools import lru_cache
from typing import Optional

from app.domain.repositories.uow import IUnitOfWork
from app.infrastructure.repositories.db_uow import DBUnitOfWork
from core.config import Settings, get_settings
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

logger = logging.getLogger(__name__)


class Postgres:
    """文件/账户元数据所在的Postgres连接管理

    引擎和会话工厂在应用生命周期开始时创建，结束时释放。
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self._settings = settings or get_settings()

    async def init(self) -> None:
        """创建异步引擎和会话工厂，重复调用直接跳过"""
        if self._engine is not None:
            logger.warning("元数据库连接已存在，忽略重复初始化")
            return

        try:
            logger.info("连接元数据库(Postgres)中")
            # 1.创建数据库引擎，开发环境输出sql
            self._engine = create_async_engine(
                self._settings.sqlalchemy_database_url,
                echo=self._settings.env == "development",
                pool_pre_ping=True,
            )

            # 2.创建会话工厂，提交后不过期，服务层在事务结束后仍会读取领域对象
            self._session_factory = async_sessionmaker(
                bind=self._engine,
                autoflush=False,
                expire_on_commit=False,
            )
            logger.info("元数据库连接池创建完成")
        except Exception as e:
            logger.error(f"元数据库连接池创建失败: {e}")
            raise

    async def shutdown(self) -> None:
        """释放连接池"""
        if self._engine:
            await self._engine.dispose()
            logger.info("元数据库连接池已释放")
        else:
            logger.warning("元数据库连接池不存在，无需释放")
        self._engine = None
        self._session_factory = None

        get_postgres.cache_clear()

    async def ping(self) -> None:
        """执行SELECT 1，连接不可用时直接抛出异常"""
        async with self.session_factory() as session:
            await session.execute(text("SELECT 1"))

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if not self._session_factory:
            raise RuntimeError(
                "元数据库尚未连接，需要在应用生命周期内调用init"
            )
        return self._session_factory


@lru_cache()
def get_postgres() -> Postgres:
    return Postgres()


def get_uow() -> IUnitOfWork:
    """为每次服务调用创建新的工作单元"""
    return DBUnitOfWork(session_factory=get_postgres().session_factory)
