import logging

from app.application.services.status_service import StatusService
from app.interfaces.schemas.status import StatsResponse, StatusResponse
from app.interfaces.service_dependencies import get_status_service
from fastapi import APIRouter, Depends

logger = logging.getLogger(__name__)
router = APIRouter(tags=["状态模块"])


@router.get(
    "/status",
    response_model=StatusResponse,
    summary="系统健康检查",
    description="检查redis和数据库是否可用",
)
async def get_status(
    status_service: StatusService = Depends(get_status_service),
) -> StatusResponse:
    """系统健康检查"""
    return StatusResponse(**await status_service.get_status())


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="数量统计",
    description="统计用户和文件数量",
)
async def get_stats(
    status_service: StatusService = Depends(get_status_service),
) -> StatsResponse:
    return StatsResponse(**await status_service.get_stats())
