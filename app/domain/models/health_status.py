from pydantic import BaseModel


class HealthStatus(BaseModel):
    """服务健康状态"""

    service: str = ""  # 服务名字
    status: str = ""  # ok/error
    details: str = ""  # 异常详情

    def is_ok(self) -> bool:
        return self.status == "ok"
