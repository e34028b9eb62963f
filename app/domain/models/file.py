from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel

ROOT_PARENT_ID = "0"  # 存储层使用的根目录标记
MAX_FILES_PER_PAGE = 20


class FileType(str, Enum):
    """文件类型枚举"""

    FOLDER = "folder"
    FILE = "file"
    IMAGE = "image"

    @classmethod
    def parse(cls, value: Any) -> Optional["FileType"]:
        """将外部传递的类型转换为枚举，非法值返回None"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


def is_root_parent(parent_id: Any) -> bool:
    """判断外部传递的父级id是否指向根目录(缺省/0/"0"/空字符串)"""
    return parent_id in (None, 0, ROOT_PARENT_ID, "")


class File(BaseModel):
    """文件/文件夹领域模型

    parent_id为None表示位于根目录，否则为父文件夹的id；
    local_path仅在非文件夹类型时存在。
    """

    id: Optional[str] = None  # 文件id，由持久层在写入时分配
    user_id: str  # 文件所属用户ID
    name: str  # 文件名字
    type: FileType  # 文件类型
    is_public: bool = False  # 是否公开
    parent_id: Optional[str] = None  # 父文件夹id
    local_path: Optional[str] = None  # 文件内容在磁盘中的绝对路径

    def is_folder(self) -> bool:
        """检查是否为文件夹"""
        return self.type == FileType.FOLDER

    def is_readable_by(self, user_id: Optional[str]) -> bool:
        """公开文件任何人可读，私有文件只有所有者可读"""
        return self.is_public or (user_id is not None and self.user_id == user_id)

    @property
    def storage_parent_id(self) -> str:
        """父级id在存储层中的表示"""
        return self.parent_id if self.parent_id is not None else ROOT_PARENT_ID

    @property
    def public_parent_id(self) -> Union[int, str]:
        """父级id在接口中的表示，根目录返回整数0"""
        return self.parent_id if self.parent_id is not None else 0

    @staticmethod
    def parent_from_storage(value: Optional[str]) -> Optional[str]:
        """将存储层的父级id转换为领域模型中的表示"""
        if value is None or value == ROOT_PARENT_ID:
            return None
        return value
