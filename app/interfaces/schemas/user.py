"""用户相关 Schema"""

from typing import Optional

from app.domain.models.user import User
from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """创建用户请求，字段校验由服务层完成"""

    email: Optional[str] = Field(None, description="邮箱")
    password: Optional[str] = Field(None, description="密码")


class UserResponse(BaseModel):
    """用户信息响应"""

    email: str = Field(..., description="邮箱")
    id: str = Field(..., description="用户id")

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(email=user.email, id=user.id)
