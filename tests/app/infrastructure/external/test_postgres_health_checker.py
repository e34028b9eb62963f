import asyncio

from app.infrastructure.external.health_checker.postgres_health_checker import (
    PostgresHealthChecker,
)


class _FakePostgres:
    def __init__(self, error: Exception | None = None) -> None:
        self._error = error

    async def ping(self) -> None:
        if self._error:
            raise self._error


def test_postgres_health_checker_ok() -> None:
    status = asyncio.run(PostgresHealthChecker(_FakePostgres()).check())

    assert status.service == "db"
    assert status.is_ok()


def test_postgres_health_checker_reports_error() -> None:
    status = asyncio.run(
        PostgresHealthChecker(_FakePostgres(ConnectionRefusedError("refused"))).check()
    )

    assert not status.is_ok()
    assert status.details == "refused"
