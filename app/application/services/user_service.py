"""账户服务"""

import logging
from typing import Callable, Optional

from app.application.errors.exceptions import ValidationError
from app.domain.external.job_queue import JobQueue
from app.domain.models.user import User
from app.domain.repositories.uow import IUnitOfWork
from core.security import get_password_hash

logger = logging.getLogger(__name__)


class UserService:
    """账户服务，负责创建用户，创建成功后投递欢迎邮件任务"""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        job_queue: JobQueue,
    ) -> None:
        self._uow_factory = uow_factory
        self.job_queue = job_queue

    async def create_user(self, email: Optional[str], password: Optional[str]) -> User:
        """创建用户

        Raises:
            ValidationError: 缺少邮箱/密码或邮箱已被注册
        """
        if not email:
            raise ValidationError("Missing email")
        if not password:
            raise ValidationError("Missing password")

        async with self._uow_factory() as uow:
            if await uow.user.get_by_email(email):
                raise ValidationError("Already exist")
            user = await uow.user.create(
                User(email=email, password_hash=get_password_hash(password))
            )

        logger.info(f"User created: {user.id}")
        await self.job_queue.enqueue(f"Welcome email [{user.id}]", {"userId": user.id})
        return user
