from .retry_policy import RetryPolicy
from .task_queue import TaskQueue

__all__ = ["RetryPolicy", "TaskQueue"]
