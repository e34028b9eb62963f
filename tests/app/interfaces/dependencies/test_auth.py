import asyncio

import pytest
from app.application.errors.exceptions import UnauthorizedError
from app.interfaces.dependencies.auth import (
    get_current_user,
    get_current_user_optional,
    get_request_token,
)
from fastapi.security import HTTPAuthorizationCredentials


def test_get_request_token_prefers_bearer() -> None:
    bearer = HTTPAuthorizationCredentials(scheme="Bearer", credentials="from-bearer")

    assert get_request_token(bearer, "from-header") == "from-bearer"
    assert get_request_token(None, "from-header") == "from-header"
    assert get_request_token(None, "") is None
    assert get_request_token(None, None) is None


def test_get_current_user_optional_resolves_session(auth_service, make_user) -> None:
    user, token = make_user("bob@dylan.com")

    assert asyncio.run(get_current_user_optional(token, auth_service)).id == user.id
    assert asyncio.run(get_current_user_optional("unknown", auth_service)) is None
    assert asyncio.run(get_current_user_optional(None, auth_service)) is None


def test_get_current_user_requires_user(make_user) -> None:
    user, _ = make_user("bob@dylan.com")

    assert asyncio.run(get_current_user(user)) is user
    with pytest.raises(UnauthorizedError):
        asyncio.run(get_current_user(None))
