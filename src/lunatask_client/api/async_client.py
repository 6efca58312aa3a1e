# src/lunatask_client/api/async_client.py

from __future__ import annotations

import logging

import httpx

from ..config import DEFAULT_TIMEOUT_SECONDS, Settings
from ..tasks.task_models import ExternalSource, Task
from . import wire
from .wire import ClientConfig, TaskPayload

logger = logging.getLogger(__name__)


class AsyncTaskClient:
    """
    asyncio flavour of TaskClient: same wire contract, same error policy.

    Each coroutine issues one request and awaits it. The client holds no mutable state
    besides the connection pool, so concurrent calls (e.g. via asyncio.gather) are independent.
    """

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = wire.BASE_URL,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = ClientConfig(access_token=access_token, base_url=base_url, timeout=timeout)
        self._http = httpx.AsyncClient(
            base_url=self.config.base_url,
            headers=self.config.auth_headers(),
            timeout=self.config.httpx_timeout(),
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None
    ) -> AsyncTaskClient:
        return cls(
            settings.access_token or "",
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> AsyncTaskClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def check_connection(self) -> bool:
        try:
            response = await self._http.get(wire.PING_PATH)
            ok = wire.is_pong(response)
        except Exception:
            logger.exception("Lunatask connection check failed")
            return False
        if not ok:
            logger.error("Lunatask connection check failed: unexpected ping body")
        return ok

    async def list_tasks(
        self, source: str | None = None, source_id: str | None = None
    ) -> list[Task]:
        params = wire.list_params(source, source_id)
        try:
            response = await self._http.get(wire.TASKS_PATH, params=params)
            tasks = wire.unwrap_tasks(response)
        except Exception:
            logger.exception("Error retrieving tasks source=%s source_id=%s", source, source_id)
            raise
        logger.debug("Retrieved %d tasks", len(tasks))
        return tasks

    async def list_tasks_for(self, external: ExternalSource) -> list[Task]:
        return await self.list_tasks(external.source, external.source_id)

    async def get_task(self, task_id: str) -> Task:
        try:
            response = await self._http.get(wire.task_path(task_id))
            return wire.unwrap_task(response)
        except Exception:
            logger.exception("Error retrieving task task_id=%s", task_id)
            raise

    async def create_task(self, params: TaskPayload) -> Task:
        try:
            response = await self._http.post(
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

    async def update_task(self, task_id: str, params: TaskPayload) -> Task:
        try:
            response = await self._http.put(
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

    async def delete_task(self, task_id: str) -> Task:
        try:
            response = await self._http.delete(wire.task_path(task_id))
            task = wire.unwrap_task(response)
        except Exception:
            logger.exception("Error deleting task task_id=%s", task_id)
            raise
        logger.info("Deleted task task_id=%s", task_id)
        return task
