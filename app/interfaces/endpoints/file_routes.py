import logging
from typing import List, Optional

from app.application.services.file_service import FileService
from app.interfaces.dependencies import CurrentUser, OptionalUser
from app.interfaces.schemas import ErrorResponse
from app.interfaces.schemas.file import FileResponse, UploadFileRequest
from app.interfaces.service_dependencies import get_file_service
from fastapi import APIRouter, Depends, Query, status
from starlette.responses import StreamingResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/files", tags=["文件模块"])


@router.post(
    path="",
    response_model=FileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="文件上传接口",
    description="创建文件夹，或者上传base64编码的文件/图片，图片会触发缩略图生成任务",
    responses={400: {"model": ErrorResponse}},
)
async def upload_file(
    request: UploadFileRequest,
    current_user: CurrentUser,
    file_service: FileService = Depends(get_file_service),
) -> FileResponse:
    """上传文件并返回文件信息"""
    file = await file_service.upload_file(
        user_id=current_user.id,
        name=request.name,
        file_type=request.type,
        parent_id=request.parent_id,
        is_public=request.is_public,
        data=request.data,
    )
    return FileResponse.from_domain(file)


@router.get(
    path="",
    response_model=List[FileResponse],
    summary="文件列表接口",
    description="分页获取当前用户在指定父文件夹下的文件，每页最多20条，最新创建的排在最前面",
)
async def list_files(
    current_user: CurrentUser,
    parent_id: Optional[str] = Query(None, alias="parentId"),
    page: Optional[str] = Query(None),
    file_service: FileService = Depends(get_file_service),
) -> List[FileResponse]:
    """获取当前用户的文件列表"""
    files = await file_service.list_files(
        user_id=current_user.id,
        parent_id=parent_id,
        page=page,
    )
    return [FileResponse.from_domain(file) for file in files]


@router.get(
    path="/{file_id}",
    response_model=FileResponse,
    summary="获取文件信息接口",
    description="获取当前用户指定文件的基础信息",
    responses={404: {"model": ErrorResponse}},
)
async def get_file(
    file_id: str,
    current_user: CurrentUser,
    file_service: FileService = Depends(get_file_service),
) -> FileResponse:
    """获取当前用户指定文件的基础信息"""
    file = await file_service.get_file(file_id=file_id, user_id=current_user.id)
    return FileResponse.from_domain(file)


@router.put(
    path="/{file_id}/publish",
    response_model=FileResponse,
    summary="公开文件接口",
    description="将当前用户的指定文件设置为公开",
    responses={404: {"model": ErrorResponse}},
)
async def publish_file(
    file_id: str,
    current_user: CurrentUser,
    file_service: FileService = Depends(get_file_service),
) -> FileResponse:
    file = await file_service.publish(file_id=file_id, user_id=current_user.id)
    return FileResponse.from_domain(file)


@router.put(
    path="/{file_id}/unpublish",
    response_model=FileResponse,
    summary="取消公开文件接口",
    description="将当前用户的指定文件设置为私有",
    responses={404: {"model": ErrorResponse}},
)
async def unpublish_file(
    file_id: str,
    current_user: CurrentUser,
    file_service: FileService = Depends(get_file_service),
) -> FileResponse:
    file = await file_service.unpublish(file_id=file_id, user_id=current_user.id)
    return FileResponse.from_domain(file)


@router.get(
    path="/{file_id}/data",
    summary="文件内容接口",
    description="获取文件内容，公开文件无需登录；传递size时返回对应尺寸的缩略图",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_file_data(
    file_id: str,
    current_user: OptionalUser,
    size: Optional[str] = Query(None),
    file_service: FileService = Depends(get_file_service),
) -> StreamingResponse:
    """以流的形式返回文件内容"""
    # 1.调用服务解析文件内容所在路径
    content = await file_service.get_content(
        file_id=file_id,
        user_id=current_user.id if current_user else None,
        size=size,
    )

    # 2.返回文件流数据
    return StreamingResponse(
        content=file_service.file_storage.iter_bytes(content.path),
        media_type=content.mime_type,
        headers={"Content-Length": str(content.size)},
    )
