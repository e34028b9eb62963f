"""依赖模块"""

from .auth import (
    CurrentUser,
    OptionalUser,
    RequestToken,
    get_current_user,
    get_current_user_optional,
    get_request_token,
)

__all__ = [
    "get_request_token",
    "get_current_user",
    "get_current_user_optional",
    "CurrentUser",
    "OptionalUser",
    "RequestToken",
]
