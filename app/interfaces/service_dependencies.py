import logging

from app.application.services.auth_service import AuthService
from app.application.services.file_service import FileService
from app.application.services.status_service import StatusService
from app.application.services.user_service import UserService
from app.infrastructure.external.file_storage.local_file_storage import LocalFileStorage
from app.infrastructure.external.health_checker.postgres_health_checker import (
    PostgresHealthChecker,
)
from app.infrastructure.external.health_checker.redis_health_checker import (
    RedisHealthChecker,
)
from app.infrastructure.external.message_queue.redis_stream_job_queue import (
    RedisStreamJobQueue,
)
from app.infrastructure.external.session_store.redis_session_store import (
    RedisSessionStore,
)
from app.infrastructure.storage.postgres import get_postgres, get_uow
from app.infrastructure.storage.redis import get_redis
from core.config import get_settings

logger = logging.getLogger(__name__)


def get_file_service() -> FileService:
    """获取文件服务"""
    # 1.初始化磁盘存储和缩略图任务队列
    settings = get_settings()
    file_storage = LocalFileStorage(root_dir=settings.storage_root)
    job_queue = RedisStreamJobQueue(stream_name=settings.thumbnail_queue_name)

    # 2.构建服务并返回
    return FileService(
        uow_factory=get_uow,
        file_storage=file_storage,
        job_queue=job_queue,
    )


def get_user_service() -> UserService:
    """获取账户服务"""
    settings = get_settings()
    return UserService(
        uow_factory=get_uow,
        job_queue=RedisStreamJobQueue(stream_name=settings.email_queue_name),
    )


def get_auth_service() -> AuthService:
    """获取认证服务"""
    settings = get_settings()
    return AuthService(
        uow_factory=get_uow,
        session_store=RedisSessionStore(ttl_seconds=settings.session_ttl_seconds),
    )


def get_status_service() -> StatusService:
    """获取状态服务"""
    checkers = [RedisHealthChecker(get_redis()), PostgresHealthChecker(get_postgres())]
    logger.debug("加载获取StatusService")
    return StatusService(checkers=checkers, uow_factory=get_uow)
