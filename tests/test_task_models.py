# tests/test_task_models.py

from __future__ import annotations

import dataclasses

import pytest

from lunatask_client.tasks.task_models import (
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

from .fakes import task_payload


def test_task_from_dict_maps_enums_and_sources() -> None:
    task = Task.from_dict(task_payload())

    assert task.status is TaskStatus.NEXT
    assert task.previous_status is TaskStatus.LATER
    assert task.priority is TaskPriority.HIGH
    assert task.motivation is TaskMotivation.MUST
    assert task.eisenhower is TaskEisenhower.URGENT_IMPORTANT
    assert task.sources == (ExternalSource("todoist", "123"),)
    assert task.goal_id is None
    assert not task.is_deleted


def test_task_keeps_unknown_enum_values_as_reported() -> None:
    task = Task.from_dict(task_payload(status="archived", priority=7, eisenhower=9, motivation="maybe"))

    assert task.status == "archived"
    assert task.priority == 7
    assert task.eisenhower == 9
    assert task.motivation == "maybe"


def test_task_optional_fields_may_be_absent() -> None:
    payload = {
        "id": "t-9",
        "area_id": "A1",
        "status": "later",
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    }
    task = Task.from_dict(payload)

    assert task.sources == ()
    assert task.estimate is None
    assert task.scheduled_on is None
    assert task.raw == payload
    assert task.to_dict() == payload


def test_task_minimal_echo_is_accepted_as_reported() -> None:
    payload = {"area_id": "A1", "id": "srv-1", "created_at": "c", "updated_at": "u"}
    task = Task.from_dict(payload)

    assert task.id == "srv-1"
    assert task.area_id == "A1"
    assert task.created_at == "c"
    assert task.updated_at == "u"
    assert task.status is None
    assert task.priority is None
    assert task.to_dict() == payload


def test_task_built_in_code_to_dict_has_every_field() -> None:
    task = Task(id="t-1", status=TaskStatus.LATER)
    out = task.to_dict()

    assert out["id"] == "t-1"
    assert out["status"] == "later"
    assert out["goal_id"] is None
    assert out["sources"] == []


def test_task_is_immutable_and_to_dict_matches_wire_shape() -> None:
    payload = task_payload()
    task = Task.from_dict(payload)

    with pytest.raises(dataclasses.FrozenInstanceError):
        task.status = TaskStatus.COMPLETED  # type: ignore[misc]

    assert task.to_dict() == payload


def test_create_params_payload_skips_unset_fields() -> None:
    assert CreateTaskParams(area_id="A1").to_payload() == {"area_id": "A1"}

    params = CreateTaskParams(
        area_id="A1",
        name="Call mom",
        status=TaskStatus.STARTED,
        motivation=TaskMotivation.WANT,
        eisenhower=TaskEisenhower.IMPORTANT_NOT_URGENT,
        priority=TaskPriority.LOWEST,
        estimate=15,
        source="github",
        source_id="issue-7",
    )
    assert params.to_payload() == {
        "area_id": "A1",
        "name": "Call mom",
        "status": "started",
        "motivation": "want",
        "eisenhower": 3,
        "priority": -2,
        "estimate": 15,
        "source": "github",
        "source_id": "issue-7",
    }


def test_update_params_from_task_overlays_name_and_note() -> None:
    task = Task.from_dict(task_payload())
    params = UpdateTaskParams.from_task(task, name="Renamed", note="details")

    assert params.to_payload() == {
        "area_id": "A1",
        "goal_id": None,
        "name": "Renamed",
        "note": "details",
        "status": "next",
        "motivation": "must",
        "eisenhower": 1,
        "estimate": 30,
        "priority": 1,
        "scheduled_on": "2024-05-01",
        "completed_at": None,
    }


def test_update_params_empty_sends_nothing() -> None:
    assert UpdateTaskParams().to_payload() == {}


def test_update_params_from_task_leaves_unreported_fields_unset() -> None:
    task = Task.from_dict({"id": "t-1", "area_id": "A1", "status": "later"})
    params = UpdateTaskParams.from_task(task)

    assert params.name is UNSET
    assert params.to_payload() == {"area_id": "A1", "status": "later"}


def test_update_params_explicit_none_clears_field() -> None:
    params = UpdateTaskParams(status=TaskStatus.NEXT, completed_at=None)

    assert params.to_payload() == {"status": "next", "completed_at": None}
