"""
Typed client for the Lunatask task API.

    from lunatask_client import TaskClient, CreateTaskParams

    with TaskClient(token) as client:
        if client.check_connection():
            task = client.create_task(CreateTaskParams(area_id="..."))
"""

from .api.async_client import AsyncTaskClient
from .api.client import TaskClient
from .api.wire import BASE_URL, ClientConfig
from .tasks.task_models import (
    CreateTaskParams,
    ExternalSource,
    Task,
    TaskEisenhower,
    TaskMotivation,
    TaskPriority,
    TaskStatus,
    UNSET,
    UpdateTaskParams,
)

__all__ = [
    "AsyncTaskClient",
    "BASE_URL",
    "ClientConfig",
    "CreateTaskParams",
    "ExternalSource",
    "Task",
    "TaskClient",
    "TaskEisenhower",
    "TaskMotivation",
    "TaskPriority",
    "TaskStatus",
    "UNSET",
    "UpdateTaskParams",
]
