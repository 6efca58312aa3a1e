# src/lunatask_client/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum, IntEnum, StrEnum
from typing import Any, Mapping, TypeVar

E = TypeVar("E", bound=Enum)


class TaskStatus(StrEnum):
    LATER = "later"
    NEXT = "next"
    STARTED = "started"
    WAITING = "waiting"
    COMPLETED = "completed"


class TaskPriority(IntEnum):
    LOWEST = -2
    LOW = -1
    NORMAL = 0
    HIGH = 1
    HIGHEST = 2


class TaskMotivation(StrEnum):
    MUST = "must"
    SHOULD = "should"
    WANT = "want"
    UNKNOWN = "unknown"


class TaskEisenhower(IntEnum):
    """Urgency/importance quadrant. 0 means the task was not classified."""

    UNCATEGORIZED = 0
    URGENT_IMPORTANT = 1
    URGENT_NOT_IMPORTANT = 2
    IMPORTANT_NOT_URGENT = 3
    NOT_URGENT_OR_IMPORTANT = 4


def _coerce(enum_cls: type[E], raw: Any) -> E | Any:
    """
    Map a wire value onto an enum member.

    Values the client does not know are kept as-is: range checks belong to the server,
    and a task must come back exactly as the server reported it.
    """
    if raw is None:
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        return raw


def _wire(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


@dataclass(frozen=True, slots=True)
class ExternalSource:
    """Provenance tag: originating system name + the task's identifier there."""

    source: str
    source_id: str

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> ExternalSource:
        return cls(source=payload.get("source"), source_id=payload.get("source_id"))

    def to_dict(self) -> dict[str, str]:
        return {"source": self.source, "source_id": self.source_id}


@dataclass(frozen=True, slots=True)
class Task:
    """
    A task as reported by the server.

    Every field is optional: whatever the server leaves out stays None, nothing is
    rejected locally. Timestamps and dates are opaque ISO-8601 strings; they are never
    parsed here. Enum fields hold the raw wire value when the server sends something unknown.
    """

    id: str | None = None
    area_id: str | None = None
    goal_id: str | None = None
    status: TaskStatus | str | None = None
    previous_status: TaskStatus | str | None = None
    estimate: int | None = None
    priority: TaskPriority | int | None = None
    motivation: TaskMotivation | str | None = None
    eisenhower: TaskEisenhower | int | None = None
    sources: tuple[ExternalSource, ...] = ()

    scheduled_on: str | None = None
    completed_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    deleted_at: str | None = None

    # Untouched server payload (includes any fields this model does not know about).
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Task:
        return cls(
            id=payload.get("id"),
            area_id=payload.get("area_id"),
            goal_id=payload.get("goal_id"),
            status=_coerce(TaskStatus, payload.get("status")),
            previous_status=_coerce(TaskStatus, payload.get("previous_status")),
            estimate=payload.get("estimate"),
            priority=_coerce(TaskPriority, payload.get("priority")),
            motivation=_coerce(TaskMotivation, payload.get("motivation")),
            eisenhower=_coerce(TaskEisenhower, payload.get("eisenhower")),
            sources=tuple(ExternalSource.from_dict(s) for s in payload.get("sources") or ()),
            scheduled_on=payload.get("scheduled_on"),
            completed_at=payload.get("completed_at"),
            created_at=payload.get("created_at"),
            updated_at=payload.get("updated_at"),
            deleted_at=payload.get("deleted_at"),
            raw=dict(payload),
        )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def to_dict(self) -> dict[str, Any]:
        """
        Wire shape of the task.

        For a task decoded from a server payload only the keys the server sent are
        returned; a task built in code returns every field.
        """
        out: dict[str, Any] = {}
        for f in fields(self):
            if f.name == "raw":
                continue
            if self.raw and f.name not in self.raw:
                continue
            value = getattr(self, f.name)
            if f.name == "sources":
                out["sources"] = [s.to_dict() for s in value]
            else:
                out[f.name] = _wire(value)
        return out


class _Unset:
    """Marker for an update field the caller did not set (distinct from None, sent as null)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def _payload_of(params: Any, *, skip_none: bool) -> dict[str, Any]:
    """Collect the fields that are set, converting enum members to wire values."""
    out: dict[str, Any] = {}
    for f in fields(params):
        value = getattr(params, f.name)
        if value is UNSET or (skip_none and value is None):
            continue
        out[f.name] = _wire(value)
    return out


@dataclass(frozen=True, slots=True)
class CreateTaskParams:
    """Body of POST /tasks. Only area_id is required; unset fields are not sent."""

    area_id: str
    goal_id: str | None = None
    name: str | None = None
    note: str | None = None
    status: TaskStatus | str | None = None
    motivation: TaskMotivation | str | None = None
    eisenhower: TaskEisenhower | int | None = None
    estimate: int | None = None
    priority: TaskPriority | int | None = None
    scheduled_on: str | None = None
    completed_at: str | None = None
    source: str | None = None
    source_id: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return _payload_of(self, skip_none=True)


@dataclass(frozen=True, slots=True)
class UpdateTaskParams:
    """
    Body of PUT /tasks/{id}.

    Fields left at UNSET are not sent. An explicit None is sent as JSON null, which is
    how a field is cleared (e.g. completed_at=None to reopen a task). Whether the server
    merges or replaces is up to the server.
    """

    area_id: str | None = UNSET
    goal_id: str | None = UNSET
    name: str | None = UNSET
    note: str | None = UNSET
    status: TaskStatus | str | None = UNSET
    motivation: TaskMotivation | str | None = UNSET
    eisenhower: TaskEisenhower | int | None = UNSET
    estimate: int | None = UNSET
    priority: TaskPriority | int | None = UNSET
    scheduled_on: str | None = UNSET
    completed_at: str | None = UNSET

    @classmethod
    def from_task(
        cls,
        task: Task,
        *,
        name: str | None = UNSET,
        note: str | None = UNSET,
    ) -> UpdateTaskParams:
        """
        Build an update carrying the task's current values plus optional name/note.

        Fields the server reported as null are sent as null; fields it did not report
        at all are left unset.
        """

        def current(attr: str) -> Any:
            if task.raw and attr not in task.raw:
                return UNSET
            return getattr(task, attr)

        return cls(
            area_id=current("area_id"),
            goal_id=current("goal_id"),
            name=name,
            note=note,
            status=current("status"),
            motivation=current("motivation"),
            eisenhower=current("eisenhower"),
            estimate=current("estimate"),
            priority=current("priority"),
            scheduled_on=current("scheduled_on"),
            completed_at=current("completed_at"),
        )

    def to_payload(self) -> dict[str, Any]:
        return _payload_of(self, skip_none=False)
