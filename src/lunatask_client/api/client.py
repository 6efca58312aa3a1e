# src/lunatask_client/api/client.py

from __future__ import annotations

import logging

import httpx

from ..config import DEFAULT_TIMEOUT_SECONDS, Settings
from ..tasks.task_models import ExternalSource, Task
from . import wire
from .wire import ClientConfig, TaskPayload

logger = logging.getLogger(__name__)


class TaskClient:
    """
    Synchronous Lunatask API client.

    One method call = one HTTP request. Every request carries the bearer token.

    Error policy:
    - check_connection() never raises: any failure is logged and reported as False.
    - every other operation logs the failure and re-raises the original httpx
      (or decoding) error unchanged. No retries, no translation.
    """

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = wire.BASE_URL,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = ClientConfig(access_token=access_token, base_url=base_url, timeout=timeout)
        self._http = httpx.Client(
            base_url=self.config.base_url,
            headers=self.config.auth_headers(),
            timeout=self.config.httpx_timeout(),
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: httpx.BaseTransport | None = None
    ) -> TaskClient:
        return cls(
            settings.access_token or "",
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> TaskClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def check_connection(self) -> bool:
        """Return True if the token is accepted (GET /ping answers "pong")."""
        try:
            response = self._http.get(wire.PING_PATH)
            ok = wire.is_pong(response)
        except Exception:
            logger.exception("Lunatask connection check failed")
            return False
        if not ok:
            logger.error("Lunatask connection check failed: unexpected ping body")
        return ok

    def list_tasks(self, source: str | None = None, source_id: str | None = None) -> list[Task]:
        """
        List tasks, optionally filtered by provenance.

        `source` and `source_id` are independent filters; each is sent only when non-empty.
        Tasks are returned in server order.
        """
        params = wire.list_params(source, source_id)
        try:
            response = self._http.get(wire.TASKS_PATH, params=params)
            tasks = wire.unwrap_tasks(response)
        except Exception:
            logger.exception("Error retrieving tasks source=%s source_id=%s", source, source_id)
            raise
        logger.debug("Retrieved %d tasks", len(tasks))
        return tasks

    def list_tasks_for(self, external: ExternalSource) -> list[Task]:
        return self.list_tasks(external.source, external.source_id)

    def get_task(self, task_id: str) -> Task:
        try:
            response = self._http.get(wire.task_path(task_id))
            return wire.unwrap_task(response)
        except Exception:
            logger.exception("Error retrieving task task_id=%s", task_id)
            raise

    def create_task(self, params: TaskPayload) -> Task:
        """Create a task. The server validates the payload; the created task is returned as reported."""
        try:
            response = self._http.post(
                wire.TASKS_PATH,
                json=wire.payload_of(params),
                headers=wire.JSON_HEADERS,
            )
            task = wire.unwrap_task(response)
        except Exception:
            logger.exception("Error creating task")
            raise
        logger.info("Created task task_id=%s", task.id)
        return task

    def update_task(self, task_id: str, params: TaskPayload) -> Task:
        try:
            response = self._http.put(
                wire.task_path(task_id),
                json=wire.payload_of(params),
                headers=wire.JSON_HEADERS,
            )
            task = wire.unwrap_task(response)
        except Exception:
            logger.exception("Error updating task task_id=%s", task_id)
            raise
        logger.info("Updated task task_id=%s", task_id)
        return task

    def delete_task(self, task_id: str) -> Task:
        """Delete a task and return the deleted representation (see Task.deleted_at)."""
        try:
            response = self._http.delete(wire.task_path(task_id))
            task = wire.unwrap_task(response)
        except Exception:
            logger.exception("Error deleting task task_id=%s", task_id)
            raise
        logger.info("Deleted task task_id=%s", task_id)
        return task
