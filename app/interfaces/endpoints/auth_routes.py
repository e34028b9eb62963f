"""认证路由模块"""

import logging
from typing import Annotated, Optional

from app.application.services.auth_service import AuthService
from app.interfaces.dependencies import RequestToken
from app.interfaces.schemas import ErrorResponse
from app.interfaces.schemas.auth import TokenResponse
from app.interfaces.service_dependencies import get_auth_service
from fastapi import APIRouter, Depends, Header, Response, status

logger = logging.getLogger(__name__)
router = APIRouter(tags=["认证模块"])


@router.get(
    "/connect",
    response_model=TokenResponse,
    summary="登录",
    description="使用 `Authorization: Basic base64(email:password)` 换取会话令牌，令牌24小时后过期",
    responses={401: {"model": ErrorResponse}},
)
async def connect(
    authorization: Annotated[Optional[str], Header()] = None,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    token = await auth_service.connect(authorization)
    return TokenResponse(token=token)


@router.get(
    "/disconnect",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="注销",
    description="注销当前会话令牌",
    responses={401: {"model": ErrorResponse}},
)
async def disconnect(
    token: RequestToken,
    auth_service: AuthService = Depends(get_auth_service),
) -> Response:
    await auth_service.disconnect(token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
