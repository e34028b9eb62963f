import asyncio

from app.application.services.status_service import StatusService
from app.domain.models.health_status import HealthStatus


class _BrokenChecker:
    service_name = "db"

    async def check(self) -> HealthStatus:
        raise ConnectionError("connection refused")


class _StaticChecker:
    def __init__(self, service_name: str, status: str) -> None:
        self.service_name = service_name
        self._status = status

    async def check(self) -> HealthStatus:
        return HealthStatus(service=self.service_name, status=self._status)


def test_get_status_reports_each_service(uow_factory) -> None:
    service = StatusService(
        checkers=[_StaticChecker("redis", "ok"), _BrokenChecker()],
        uow_factory=uow_factory,
    )

    assert asyncio.run(service.get_status()) == {"redis": True, "db": False}


def test_check_all_converts_exceptions_to_error_status(uow_factory) -> None:
    service = StatusService(checkers=[_BrokenChecker()], uow_factory=uow_factory)

    statuses = asyncio.run(service.check_all())

    assert statuses[0].status == "error"
    assert "connection refused" in statuses[0].details


def test_get_stats_counts_users_and_files(uow_factory, file_service, make_user) -> None:
    service = StatusService(checkers=[], uow_factory=uow_factory)
    user, _ = make_user("bob@dylan.com")
    asyncio.run(file_service.upload_file(user.id, "docs", "folder"))
    asyncio.run(file_service.upload_file(user.id, "a.txt", "file", data="aGVsbG8="))

    assert asyncio.run(service.get_stats()) == {"users": 1, "files": 2}
