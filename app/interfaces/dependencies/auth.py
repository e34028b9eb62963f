"""认证依赖模块"""

from typing import Annotated, Optional

from app.application.errors.exceptions import UnauthorizedError
from app.application.services.auth_service import AuthService
from app.domain.models.user import User
from app.interfaces.service_dependencies import get_auth_service
from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# auto_error=False 让可选认证的接口也能复用
security = HTTPBearer(auto_error=False)


def get_request_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    x_token: Annotated[Optional[str], Header(alias="X-Token")] = None,
) -> Optional[str]:
    """从 `Authorization: Bearer` 请求头中提取令牌，兼容 `X-Token` 请求头"""
    if credentials and credentials.credentials:
        return credentials.credentials
    return x_token or None


async def get_current_user_optional(
    token: Annotated[Optional[str], Depends(get_request_token)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> Optional[User]:
    """获取当前登录用户（可选）

    如果未提供令牌或令牌无效，返回 None
    """
    return await auth_service.resolve_user(token)


async def get_current_user(
    user: Annotated[Optional[User], Depends(get_current_user_optional)],
) -> User:
    """获取当前登录用户

    Raises:
        UnauthorizedError: 401 未授权
    """
    if not user:
        raise UnauthorizedError()
    return user


# 类型别名，方便使用
CurrentUser = Annotated[User, Depends(get_current_user)]
OptionalUser = Annotated[Optional[User], Depends(get_current_user_optional)]
RequestToken = Annotated[Optional[str], Depends(get_request_token)]
