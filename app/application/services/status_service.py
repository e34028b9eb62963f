import asyncio
import logging
from typing import Callable, Dict, List

from app.domain.external.health_checker import HealthChecker
from app.domain.models.health_status import HealthStatus
from app.domain.repositories.uow import IUnitOfWork

logger = logging.getLogger(__name__)


class StatusService:
    """Aggregates health checks and usage statistics."""

    def __init__(
        self,
        checkers: List[HealthChecker],
        uow_factory: Callable[[], IUnitOfWork],
    ) -> None:
        """Create the service with the health checkers."""
        self._checkers = checkers
        self._uow_factory = uow_factory

    async def check_all(self) -> List[HealthStatus]:
        """Run all health checks and return their statuses."""
        results = await asyncio.gather(
            *(checker.check() for checker in self._checkers),
            return_exceptions=True,
        )

        statuses: List[HealthStatus] = []
        for checker, result in zip(self._checkers, results):
            if isinstance(result, Exception):
                service = getattr(checker, "service_name", checker.__class__.__name__)
                logger.error(f"{service} health check failed: {str(result)}")
                statuses.append(
                    HealthStatus(service=str(service), status="error", details=str(result))
                )
            else:
                statuses.append(result)
        return statuses

    async def get_status(self) -> Dict[str, bool]:
        """Return liveness of every checked service, keyed by service name."""
        return {status.service: status.is_ok() for status in await self.check_all()}

    async def get_stats(self) -> Dict[str, int]:
        """Count users and files."""
        async with self._uow_factory() as uow:
            users = await uow.user.count()
            files = await uow.file.count()
        return {"users": users, "files": files}
