# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from lunatask_client.tasks.task_models import Task

from .fakes import FakeTaskApi, task_payload

TOKEN = "test-token"


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap/CLI code.

    We intentionally use a SimpleNamespace rather than reading the real environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        access_token=TOKEN,
        base_url="https://api.lunatask.app/v1",
        timeout_seconds=5.0,
        log_level="INFO",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def fake_api() -> FakeTaskApi:
    return FakeTaskApi(
        [
            Task.from_dict(task_payload("t-1")),
            Task.from_dict(task_payload("t-2", status="completed", completed_at="2024-05-01T12:00:00Z")),
        ]
    )
