import pytest
from app.domain.models.identifier import (
    ID_LENGTH,
    NULL_ID,
    is_valid_id,
    new_object_id,
    sanitize_id,
)


@pytest.mark.parametrize(
    "value",
    ["5f1e3c2b9a8d7e6f5a4b3c2d", "5F1E3C2B9A8D7E6F5A4B3C2D", NULL_ID],
)
def test_is_valid_id_accepts_24_hex_chars(value) -> None:
    assert is_valid_id(value)


@pytest.mark.parametrize(
    "value",
    [None, 0, 123, "", "0", "abc", "5f1e3c2b9a8d7e6f5a4b3c2", "5f1e3c2b9a8d7e6f5a4b3c2dd", "zzzzzzzzzzzzzzzzzzzzzzzz"],
)
def test_is_valid_id_rejects_everything_else(value) -> None:
    assert not is_valid_id(value)


def test_sanitize_id_substitutes_null_id() -> None:
    assert sanitize_id("5F1E3C2B9A8D7E6F5A4B3C2D") == "5f1e3c2b9a8d7e6f5a4b3c2d"
    assert sanitize_id("../etc/passwd") == NULL_ID
    assert sanitize_id(None) == NULL_ID


def test_new_object_id_is_valid_and_monotonic() -> None:
    ids = [new_object_id() for _ in range(100)]

    assert all(len(i) == ID_LENGTH and is_valid_id(i) for i in ids)
    assert len(set(ids)) == 100
    assert ids == sorted(ids)


def test_new_object_id_counter_restarts_each_second(monkeypatch) -> None:
    from app.domain.models import identifier

    now = 1_700_000_000
    monkeypatch.setattr(identifier.time, "time", lambda: now)
    # 上一秒的计数器已经接近上限
    monkeypatch.setattr(identifier, "_last_timestamp", now - 1)
    monkeypatch.setattr(identifier, "_counter", 0xFFFFFE)

    ids = [new_object_id() for _ in range(10)]

    assert ids == sorted(ids)
    assert all(i.startswith(f"{now:08x}") for i in ids)
    assert int(ids[0][-6:], 16) <= 0xFFFF
