"""文件相关 Schema"""

from typing import Any, Optional, Union

from app.domain.models.file import File
from pydantic import ConfigDict, Field

from .base import CamelModel


class UploadFileRequest(CamelModel):
    """上传文件/创建文件夹请求

    字段不做类型约束，校验顺序和错误信息完全由服务层决定。
    """

    name: Optional[Any] = Field(None, description="文件名字")
    type: Optional[Any] = Field(None, description="文件类型: folder, file, image")
    parent_id: Optional[Any] = Field(None, description="父文件夹id，0表示根目录")
    is_public: Optional[Any] = Field(False, description="是否公开")
    data: Optional[Any] = Field(None, description="base64编码的文件内容，文件夹不需要")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "a.txt",
                "type": "file",
                "parentId": 0,
                "isPublic": False,
                "data": "aGVsbG8=",
            }
        }
    )


class FileResponse(CamelModel):
    """文件信息响应"""

    id: str = Field(..., description="文件id")
    user_id: str = Field(..., description="文件所属用户id")
    name: str = Field(..., description="文件名字")
    type: str = Field(..., description="文件类型")
    is_public: bool = Field(..., description="是否公开")
    parent_id: Union[int, str] = Field(..., description="父文件夹id，根目录为0")

    @classmethod
    def from_domain(cls, file: File) -> "FileResponse":
        """将文件领域模型转换为响应模型"""
        return cls(
            id=file.id,
            user_id=file.user_id,
            name=file.name,
            type=file.type.value,
            is_public=file.is_public,
            parent_id=file.public_parent_id,
        )
