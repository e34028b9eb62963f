import json
import logging
from typing import Any, Dict

from app.domain.external.job_queue import JobQueue
from app.infrastructure.storage.redis import RedisClient, get_redis

logger = logging.getLogger(__name__)


class RedisStreamJobQueue(JobQueue):
    """基于RedisStream的后台任务队列，每个队列对应一个stream"""

    def __init__(self, stream_name: str, redis_client: RedisClient | None = None) -> None:
        """构造函数，完成队列名字和Redis客户端的初始化"""
        self._stream_name = stream_name
        self._redis = redis_client or get_redis()

    @property
    def stream_name(self) -> str:
        return self._stream_name

    async def enqueue(self, job_name: str, payload: Dict[str, Any]) -> str:
        """往redis-stream中添加一条任务并返回消息id，不等待任务执行完成"""
        logger.debug(f"往任务队列[{self._stream_name}]中投递任务: {job_name}")

        return await self._redis.client.xadd(
            self._stream_name,
            {"name": job_name, "data": json.dumps(payload, ensure_ascii=False)},
        )
