# src/lunatask_client/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from ..core.ports import TaskApi
from ..tasks.task_models import CreateTaskParams, Task, UpdateTaskParams

CommandHandler = Callable[[TaskApi, list[str]], str]

logger = logging.getLogger(__name__)


class UsageError(ValueError):
    """Bad command-line arguments; the message is shown to the user."""


class CommandRegistry:
    """Simple command registry: `<name> [args...]` -> handler(api, args)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, api: TaskApi, argv: list[str]) -> str:
        """
        Dispatch argv (command name first) and return the reply text.
        HTTP errors from the api propagate to the caller.
        """
        if not argv:
            return self.build_help()

        name = argv[0].lower()
        args = argv[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {name}. Use 'help' to list available commands."

        logger.debug("Command %s args=%s", name, args)
        try:
            return handler(api, args)
        except UsageError as e:
            return f"{e}\nUsage: {self._help.get(name, name)}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


_INT_FIELDS = {"eisenhower", "estimate", "priority"}


def _parse_fields(args: list[str], allowed: set[str], *, empty_is_null: bool = False) -> dict[str, Any]:
    """
    Parse `key=value` pairs. Numeric fields are converted to int.
    With empty_is_null, `key=` yields None (sent as null to clear the field).
    """
    out: dict[str, Any] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        key = key.strip()
        if not sep or not key:
            raise UsageError(f"Expected key=value, got: {arg!r}")
        if key not in allowed:
            raise UsageError(f"Unknown field: {key}. Allowed: {', '.join(sorted(allowed))}")
        if empty_is_null and value == "":
            out[key] = None
            continue
        if key in _INT_FIELDS:
            try:
                out[key] = int(value)
            except ValueError:
                raise UsageError(f"Field {key} must be an integer, got: {value!r}") from None
        else:
            out[key] = value
    return out


def _fmt_enum(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, Enum):
        return value.name.lower()
    return str(value)


def format_task(task: Task) -> str:
    parts = [
        str(task.id),
        f"[{_fmt_enum(task.status)}]",
        f"area={task.area_id}",
        f"priority={_fmt_enum(task.priority)}",
        f"motivation={_fmt_enum(task.motivation)}",
        f"eisenhower={_fmt_enum(task.eisenhower)}",
    ]
    if task.goal_id:
        parts.append(f"goal={task.goal_id}")
    if task.scheduled_on:
        parts.append(f"scheduled={task.scheduled_on}")
    if task.completed_at:
        parts.append(f"completed={task.completed_at}")
    if task.deleted_at:
        parts.append(f"deleted={task.deleted_at}")
    if task.sources:
        parts.append("sources=" + ",".join(f"{s.source}:{s.source_id}" for s in task.sources))
    return " ".join(parts)


def cmd_help(api: TaskApi, args: list[str]) -> str:
    return registry.build_help()


def cmd_ping(api: TaskApi, args: list[str]) -> str:
    if api.check_connection():
        return "pong: access token accepted."
    return "Connection check failed (see log for details)."


def cmd_list(api: TaskApi, args: list[str]) -> str:
    """
    list                    -> all tasks
    list <source>           -> tasks from one source system
    list <source> <id>      -> tasks linked to one source-side identifier
    """
    if len(args) > 2:
        raise UsageError("Too many arguments.")
    source = args[0] if len(args) >= 1 else None
    source_id = args[1] if len(args) >= 2 else None

    tasks = api.list_tasks(source, source_id)
    if not tasks:
        return "No tasks."
    lines = [f"{len(tasks)} task(s):"]
    lines.extend(format_task(t) for t in tasks)
    return "\n".join(lines)


def cmd_get(api: TaskApi, args: list[str]) -> str:
    if len(args) != 1:
        raise UsageError("Expected exactly one task id.")
    return format_task(api.get_task(args[0]))


_CREATE_FIELDS = {
    "goal_id",
    "name",
    "note",
    "status",
    "motivation",
    "eisenhower",
    "estimate",
    "priority",
    "scheduled_on",
    "completed_at",
    "source",
    "source_id",
}

_UPDATE_FIELDS = (_CREATE_FIELDS - {"source", "source_id"}) | {"area_id"}


def cmd_create(api: TaskApi, args: list[str]) -> str:
    if not args or "=" in args[0]:
        raise UsageError("Missing area id.")
    params = CreateTaskParams(area_id=args[0], **_parse_fields(args[1:], _CREATE_FIELDS))
    task = api.create_task(params)
    return "Created: " + format_task(task)


def cmd_update(api: TaskApi, args: list[str]) -> str:
    if len(args) < 2 or "=" in args[0]:
        raise UsageError("Expected a task id and at least one key=value.")
    params = UpdateTaskParams(**_parse_fields(args[1:], _UPDATE_FIELDS, empty_is_null=True))
    task = api.update_task(args[0], params)
    return "Updated: " + format_task(task)


def cmd_delete(api: TaskApi, args: list[str]) -> str:
    if len(args) != 1:
        raise UsageError("Expected exactly one task id.")
    task = api.delete_task(args[0])
    return "Deleted: " + format_task(task)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("ping", cmd_ping, help_text="Check that the access token is accepted.")
registry.register("list", cmd_list, help_text="list [source] [source_id]", aliases=["ls"])
registry.register("get", cmd_get, help_text="get <task_id>")
registry.register("create", cmd_create, help_text="create <area_id> [key=value ...]")
registry.register(
    "update",
    cmd_update,
    help_text="update <task_id> key=value [key=value ...] (key= clears a field)",
)
registry.register("delete", cmd_delete, help_text="delete <task_id>", aliases=["rm"])
