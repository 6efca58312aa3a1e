# tests/test_async_client.py

from __future__ import annotations

import asyncio

import httpx
import pytest

from lunatask_client.api.async_client import AsyncTaskClient
from lunatask_client.tasks.task_models import CreateTaskParams, TaskPriority, UpdateTaskParams

from .conftest import TOKEN
from .fakes import RecordingHandler, fail_with, respond, task_payload


def _client(handler: RecordingHandler) -> AsyncTaskClient:
    return AsyncTaskClient(TOKEN, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_async_check_connection() -> None:
    async with _client(RecordingHandler(respond(200, {"message": "pong"}))) as client:
        assert await client.check_connection() is True

    async with _client(RecordingHandler(fail_with(httpx.ConnectError))) as client:
        assert await client.check_connection() is False

    async with _client(RecordingHandler(respond(403, {"message": "pong"}))) as client:
        assert await client.check_connection() is False


@pytest.mark.asyncio
async def test_async_list_tasks_with_filters() -> None:
    handler = RecordingHandler(respond(200, {"tasks": [task_payload("t-1"), task_payload("t-2")]}))
    async with _client(handler) as client:
        tasks = await client.list_tasks("todoist", "123")

    assert handler.last.url.path == "/v1/tasks"
    assert dict(handler.last.url.params) == {"source": "todoist", "source_id": "123"}
    assert handler.last.headers["Authorization"] == f"bearer {TOKEN}"
    assert [t.id for t in tasks] == ["t-1", "t-2"]


@pytest.mark.asyncio
async def test_async_crud_round() -> None:
    def responder(request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            return httpx.Response(201, json={"task": task_payload("new", priority=2)})
        if request.method == "PUT":
            return httpx.Response(200, json={"task": task_payload("new", status="started")})
        if request.method == "DELETE":
            return httpx.Response(200, json={"task": task_payload("new", deleted_at="2024-05-02T00:00:00Z")})
        return httpx.Response(200, json={"task": task_payload("new")})

    handler = RecordingHandler(responder)
    async with _client(handler) as client:
        created = await client.create_task(CreateTaskParams(area_id="A1", priority=TaskPriority.HIGHEST))
        fetched = await client.get_task("new")
        updated = await client.update_task("new", UpdateTaskParams(status="started"))
        deleted = await client.delete_task("new")

    assert [(r.method, r.url.path) for r in handler.requests] == [
        ("POST", "/v1/tasks"),
        ("GET", "/v1/tasks/new"),
        ("PUT", "/v1/tasks/new"),
        ("DELETE", "/v1/tasks/new"),
    ]
    assert created.priority is TaskPriority.HIGHEST
    assert fetched.id == "new"
    assert updated.status == "started"
    assert deleted.deleted_at == "2024-05-02T00:00:00Z"


@pytest.mark.asyncio
async def test_async_get_task_404_propagates() -> None:
    async with _client(RecordingHandler(respond(404, {"message": "Not Found"}))) as client:
        with pytest.raises(httpx.HTTPStatusError) as excinfo:
            await client.get_task("abc")

    assert excinfo.value.response.status_code == 404


@pytest.mark.asyncio
async def test_async_concurrent_calls_are_independent() -> None:
    def responder(request: httpx.Request) -> httpx.Response:
        task_id = request.url.path.rsplit("/", 1)[-1]
        return httpx.Response(200, json={"task": task_payload(task_id)})

    handler = RecordingHandler(responder)
    async with _client(handler) as client:
        tasks = await asyncio.gather(*(client.get_task(f"t-{i}") for i in range(5)))

    assert [t.id for t in tasks] == [f"t-{i}" for i in range(5)]
    assert len(handler.requests) == 5
