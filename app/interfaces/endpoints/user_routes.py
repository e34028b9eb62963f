"""用户路由模块"""

import logging

from app.application.services.user_service import UserService
from app.interfaces.dependencies import CurrentUser
from app.interfaces.schemas import ErrorResponse
from app.interfaces.schemas.user import CreateUserRequest, UserResponse
from app.interfaces.service_dependencies import get_user_service
from fastapi import APIRouter, Depends, status

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["用户模块"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="创建用户",
    description="通过邮箱和密码创建新账户",
    responses={400: {"model": ErrorResponse}},
)
async def create_user(
    request: CreateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await user_service.create_user(email=request.email, password=request.password)
    return UserResponse.from_domain(user)


@router.get(
    "/me",
    response_model=UserResponse,
    summary="获取当前用户信息",
    responses={401: {"model": ErrorResponse}},
)
async def get_me(current_user: CurrentUser) -> UserResponse:
    return UserResponse.from_domain(current_user)
