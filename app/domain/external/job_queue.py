from typing import Any, Dict, Protocol


class JobQueue(Protocol):
    """后台任务队列协议，只负责投递任务，任务由进程外的worker消费"""

    async def enqueue(self, job_name: str, payload: Dict[str, Any]) -> str:
        """投递一条具名任务并返回任务id，返回即表示任务已被队列接收"""
        ...
