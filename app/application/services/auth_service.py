"""认证服务"""

import logging
from typing import Callable, Optional

from app.application.errors.exceptions import UnauthorizedError
from app.domain.external.session_store import SessionStore
from app.domain.models.user import User
from app.domain.repositories.uow import IUnitOfWork
from core.security import parse_basic_credentials, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """认证服务，处理 Basic 认证换取令牌、注销令牌以及令牌解析用户"""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        session_store: SessionStore,
    ) -> None:
        self._uow_factory = uow_factory
        self.session_store = session_store

    async def connect(self, authorization: Optional[str]) -> str:
        """校验 Basic 认证信息并返回新的会话令牌

        Args:
            authorization: `Authorization` 请求头原始值

        Returns:
            str: 会话令牌

        Raises:
            UnauthorizedError: 认证信息缺失或错误
        """
        credentials = parse_basic_credentials(authorization)
        if not credentials:
            raise UnauthorizedError()

        email, password = credentials
        async with self._uow_factory() as uow:
            user = await uow.user.get_by_email(email)
        if not user or not user.password_hash:
            raise UnauthorizedError()
        if not verify_password(password, user.password_hash):
            raise UnauthorizedError()

        return await self.session_store.create(user.id)

    async def disconnect(self, token: Optional[str]) -> None:
        """注销会话令牌

        Raises:
            UnauthorizedError: 令牌不存在或已过期
        """
        user = await self.resolve_user(token)
        if not user:
            raise UnauthorizedError()
        await self.session_store.delete(token)
        logger.info(f"User disconnected: {user.id}")

    async def resolve_user(self, token: Optional[str]) -> Optional[User]:
        """根据会话令牌解析当前用户，令牌无效或用户不存在时返回 None"""
        if not token:
            return None
        user_id = await self.session_store.get_user_id(token)
        if not user_id:
            return None
        async with self._uow_factory() as uow:
            return await uow.user.get_by_id(user_id)
