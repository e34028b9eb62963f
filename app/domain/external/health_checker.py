from typing import Protocol

from app.domain.models.health_status import HealthStatus


class HealthChecker(Protocol):
    """服务健康检查器协议"""

    service_name: str

    async def check(self) -> HealthStatus:
        """执行健康检查并返回状态"""
        ...
