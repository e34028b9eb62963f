from typing import Optional, Protocol


class SessionStore(Protocol):
    """会话令牌存储协议，令牌 -> 用户id，带固定过期时间"""

    async def create(self, user_id: str) -> str:
        """为用户创建一个新的会话令牌"""
        ...

    async def get_user_id(self, token: str) -> Optional[str]:
        """根据令牌获取用户id，令牌不存在或已过期返回None"""
        ...

    async def delete(self, token: str) -> None:
        """删除令牌"""
        ...
