import base64

from core.security import (
    generate_session_token,
    get_password_hash,
    parse_basic_credentials,
    verify_password,
)


def test_verify_password_returns_false_for_invalid_hash() -> None:
    assert verify_password("123456", "plain-text-password") is False


def test_password_hash_round_trip() -> None:
    hashed = get_password_hash("toto1234!")

    assert verify_password("toto1234!", hashed)
    assert not verify_password("toto1234?", hashed)


def test_generate_session_token_is_unique() -> None:
    assert generate_session_token() != generate_session_token()


def test_parse_basic_credentials() -> None:
    encoded = base64.b64encode(b"bob@dylan.com:pa:ss").decode()

    assert parse_basic_credentials(f"Basic {encoded}") == ("bob@dylan.com", "pa:ss")
    assert parse_basic_credentials(f"basic {encoded}") == ("bob@dylan.com", "pa:ss")


def test_parse_basic_credentials_rejects_malformed_headers() -> None:
    no_separator = base64.b64encode(b"bob@dylan.com").decode()

    assert parse_basic_credentials(None) is None
    assert parse_basic_credentials("") is None
    assert parse_basic_credentials("Bearer abc") is None
    assert parse_basic_credentials("Basic") is None
    assert parse_basic_credentials("Basic not-base64!") is None
    assert parse_basic_credentials(f"Basic {no_separator}") is None
