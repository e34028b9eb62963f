"""用户 ORM 模型"""

from datetime import datetime

from app.domain.models.identifier import new_object_id
from app.domain.models.user import User
from sqlalchemy import DateTime, PrimaryKeyConstraint, String, text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class UserModel(Base):
    """用户数据 ORM 模型"""

    __tablename__ = "users"
    __table_args__ = (PrimaryKeyConstraint("id", name="pk_users_id"),)

    id: Mapped[str] = mapped_column(
        String(24),
        nullable=False,
        primary_key=True,
        default=new_object_id,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )
    password_hash: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=datetime.now,
        server_default=text("CURRENT_TIMESTAMP(0)"),
    )

    @classmethod
    def from_domain(cls, user: User) -> "UserModel":
        """从领域模型创建 ORM 模型"""
        record = cls(email=user.email, password_hash=user.password_hash)
        if user.id:
            record.id = user.id
        return record

    def to_domain(self) -> User:
        """将 ORM 模型转换为领域模型"""
        return User.model_validate(self, from_attributes=True)
