from pydantic import BaseModel


class StatusResponse(BaseModel):
    """依赖服务存活状态"""

    redis: bool = False
    db: bool = False


class StatsResponse(BaseModel):
    """用户/文件数量统计"""

    users: int = 0
    files: int = 0
