import logging
from typing import Optional

from app.domain.external.session_store import SessionStore
from app.infrastructure.storage.redis import RedisClient, get_redis
from core.security import generate_session_token

logger = logging.getLogger(__name__)


class RedisSessionStore(SessionStore):
    """基于Redis的会话令牌存储，键为auth_<token>，值为用户id"""

    KEY_PREFIX = "auth_"

    def __init__(self, ttl_seconds: int, redis_client: RedisClient | None = None) -> None:
        """构造函数，完成令牌过期时间和Redis客户端的初始化"""
        self._ttl_seconds = ttl_seconds
        self._redis = redis_client or get_redis()

    def _key(self, token: str) -> str:
        return f"{self.KEY_PREFIX}{token}"

    async def create(self, user_id: str) -> str:
        """生成令牌并写入redis，到期自动失效"""
        token = generate_session_token()
        await self._redis.client.set(self._key(token), user_id, ex=self._ttl_seconds)
        logger.info(f"用户[{user_id}]会话创建成功")
        return token

    async def get_user_id(self, token: str) -> Optional[str]:
        """根据令牌获取用户id"""
        if not token:
            return None
        return await self._redis.client.get(self._key(token))

    async def delete(self, token: str) -> None:
        """删除令牌"""
        await self._redis.client.delete(self._key(token))
