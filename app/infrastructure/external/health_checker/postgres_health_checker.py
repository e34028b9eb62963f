import logging

from app.domain.external.health_checker import HealthChecker
from app.domain.models.health_status import HealthStatus
from app.infrastructure.storage.postgres import Postgres

logger = logging.getLogger(__name__)


class PostgresHealthChecker(HealthChecker):
    """Postgres健康检查器，对应/status中的db字段"""

    service_name = "db"

    def __init__(self, postgres: Postgres) -> None:
        self._postgres = postgres

    async def check(self) -> HealthStatus:
        try:
            await self._postgres.ping()
            return HealthStatus(service=self.service_name, status="ok")
        except Exception as e:
            logger.error(f"Postgres健康检查失败: {str(e)}")
            return HealthStatus(
                service=self.service_name,
                status="error",
                details=str(e),
            )
