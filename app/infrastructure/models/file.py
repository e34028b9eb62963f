from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, PrimaryKeyConstraint, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from ...domain.models.file import ROOT_PARENT_ID, File, FileType
from ...domain.models.identifier import new_object_id
from .base import Base


class FileModel(Base):
    """文件/文件夹元数据ORM模型"""

    __tablename__ = "files"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="pk_files_id"),
        Index("ix_files_user_id_parent_id", "user_id", "parent_id"),
    )

    id: Mapped[str] = mapped_column(
        String(24),
        nullable=False,
        primary_key=True,
        default=new_object_id,
    )  # 文件id，按生成顺序单调递增
    user_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )  # 文件所属用户ID
    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )  # 文件名字，不限制长度
    type: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
    )  # folder/file/image
    is_public: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        server_default=text("false"),
    )  # 是否公开
    parent_id: Mapped[str] = mapped_column(
        String(24),
        nullable=False,
        server_default=text(f"'{ROOT_PARENT_ID}'"),
    )  # 父文件夹id，根目录为'0'
    local_path: Mapped[Optional[str]] = mapped_column(
        String(1024),
        nullable=True,
    )  # 文件内容的磁盘路径，文件夹为空
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP(0)"),
    )  # 创建时间

    @classmethod
    def from_domain(cls, file: File) -> "FileModel":
        """从领域模型创建ORM模型，id为空时交由数据库层默认值生成"""
        record = cls(
            user_id=file.user_id,
            name=file.name,
            type=file.type.value,
            is_public=file.is_public,
            parent_id=file.storage_parent_id,
            local_path=file.local_path,
        )
        if file.id:
            record.id = file.id
        return record

    def to_domain(self) -> File:
        """将ORM模型转换为领域模型"""
        return File(
            id=self.id,
            user_id=self.user_id,
            name=self.name,
            type=FileType(self.type),
            is_public=self.is_public,
            parent_id=File.parent_from_storage(self.parent_id),
            local_path=self.local_path,
        )
