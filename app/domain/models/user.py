"""用户领域模型"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """用户领域模型"""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None  # 用户id，由持久层在写入时分配
    email: str
    password_hash: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
