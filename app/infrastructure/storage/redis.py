import logging
from functools import lru_cache
from typing import Optional

from core.config import Settings, get_settings
from redis.asyncio import Redis

logger = logging.getLogger(__name__)


class RedisClient:
    """Redis连接管理，会话令牌(auth_<token>)和后台任务stream共用同一个连接"""

    def __init__(self, settings: Optional[Settings] = None):
        self._client: Redis | None = None
        self._settings: Settings = settings or get_settings()

    async def init(self) -> None:
        """建立连接并ping一次，失败时阻止应用启动"""
        if self._client:
            logger.warning("Redis连接已存在，忽略重复初始化")
            return

        try:
            self._client = Redis(
                host=self._settings.redis_host,
                port=self._settings.redis_port,
                db=self._settings.redis_db,
                password=self._settings.redis_password,
                decode_responses=True,  # 令牌对应的用户id以字符串形式读取
            )
            await self._client.ping()
            logger.info(
                f"Redis连接建立成功: {self._settings.redis_host}:{self._settings.redis_port}"
            )
        except Exception as e:
            logger.error(f"Redis连接建立失败: {e}")
            self._client = None
            raise

    async def shutdown(self) -> None:
        if self._client:
            await self._client.aclose()
            logger.info("Redis连接已关闭")
        else:
            logger.warning("Redis连接不存在，无需关闭")
        self._client = None

        get_redis.cache_clear()

    @property
    def client(self) -> Redis:
        if not self._client:
            raise RuntimeError("Redis尚未连接，需要在应用生命周期内调用init")
        return self._client

    async def is_alive(self) -> bool:
        """未初始化或ping失败都视为不可用，不抛出异常"""
        if not self._client:
            return False
        try:
            return bool(await self._client.ping())
        except Exception as e:
            logger.warning(f"Redis连接不可用: {e}")
            return False


@lru_cache()
def get_redis() -> RedisClient:
    return RedisClient()
