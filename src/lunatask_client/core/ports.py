# src/lunatask_client/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the CLI.

Commands depend on this Protocol instead of TaskClient,
which keeps them testable with an in-memory fake.
"""

from typing import Any, Mapping, Protocol

from ..tasks.task_models import CreateTaskParams, Task, UpdateTaskParams


class TaskApi(Protocol):
    """Synchronous Lunatask task operations (implemented by TaskClient)."""

    def check_connection(self) -> bool: ...
    def list_tasks(self, source: str | None = None, source_id: str | None = None) -> list[Task]: ...
    def get_task(self, task_id: str) -> Task: ...
    def create_task(self, params: CreateTaskParams | Mapping[str, Any]) -> Task: ...
    def update_task(self, task_id: str, params: UpdateTaskParams | Mapping[str, Any]) -> Task: ...
    def delete_task(self, task_id: str) -> Task: ...
