# src/lunatask_client/api/wire.py

"""
Wire contract shared by the sync and async clients.

Paths, headers, query parameters and response envelopes live here so both
clients stay a thin request/response mapping over the same definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from ..config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from ..tasks.task_models import CreateTaskParams, Task, UpdateTaskParams

BASE_URL = DEFAULT_BASE_URL

PING_PATH = "/ping"
TASKS_PATH = "/tasks"

PONG = "pong"

TaskPayload = CreateTaskParams | UpdateTaskParams | Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Everything a client captures at construction. Never mutated afterwards."""

    access_token: str
    base_url: str = BASE_URL
    timeout: float | None = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.access_token or not str(self.access_token).strip():
            raise RuntimeError(
                "Lunatask access token is not set. Set LUNATASK_ACCESS_TOKEN in your .env."
            )

    def __repr__(self) -> str:
        # Keep the token out of logs and tracebacks.
        return f"ClientConfig(base_url={self.base_url!r}, timeout={self.timeout!r})"

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"bearer {self.access_token}"}

    def httpx_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.timeout)


JSON_HEADERS = {"Content-Type": "application/json"}


def task_path(task_id: str) -> str:
    return f"{TASKS_PATH}/{quote(str(task_id), safe='')}"


def list_params(source: str | None, source_id: str | None) -> dict[str, str]:
    """Query for GET /tasks. Each filter is sent only when non-empty."""
    params: dict[str, str] = {}
    if source:
        params["source"] = source
    if source_id:
        params["source_id"] = source_id
    return params


def payload_of(params: TaskPayload) -> dict[str, Any]:
    if isinstance(params, (CreateTaskParams, UpdateTaskParams)):
        return params.to_payload()
    return dict(params)


def is_pong(response: httpx.Response) -> bool:
    """True only for a 2xx response whose body is {"message": "pong"}."""
    response.raise_for_status()
    body = response.json()
    return isinstance(body, dict) and body.get("message") == PONG


def unwrap_tasks(response: httpx.Response) -> list[Task]:
    response.raise_for_status()
    return [Task.from_dict(t) for t in response.json()["tasks"]]


def unwrap_task(response: httpx.Response) -> Task:
    response.raise_for_status()
    return Task.from_dict(response.json()["task"])
