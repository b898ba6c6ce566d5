"""Task models: a tagged union over todo, deadline, and event.

Every task shares ``kind``, ``description`` and ``done``. Variant data
lives on the variant model; per-variant behaviour switches on ``kind``
(see :func:`schedule_of`).

``description`` is frozen at the field level: it is set once, at
creation, while ``done`` stays assignable for mark/unmark.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter

from taskctl.domain.dates import format_date
from taskctl.domain.types import TaskKind


class TaskBase(BaseModel):
    """Fields shared by every task variant."""

    model_config = {"validate_assignment": True}

    description: str = Field(min_length=1, frozen=True)
    done: bool = False


class Todo(TaskBase):
    """A task with no date attached."""

    kind: Literal["todo"] = "todo"


class Deadline(TaskBase):
    """A task due by a point in time."""

    kind: Literal["deadline"] = "deadline"
    due_at: datetime


class Event(TaskBase):
    """A task spanning a start and end time."""

    kind: Literal["event"] = "event"
    start_at: datetime
    end_at: datetime


Task = Annotated[Todo | Deadline | Event, Field(discriminator="kind")]

# Validates raw dicts (e.g. from storage) into the right variant.
TASK_ADAPTER: TypeAdapter[Todo | Deadline | Event] = TypeAdapter(Task)
TASK_LIST_ADAPTER: TypeAdapter[list[Todo | Deadline | Event]] = TypeAdapter(list[Task])

KIND_ICONS: dict[str, str] = {
    TaskKind.TODO.value: "T",
    TaskKind.DEADLINE.value: "D",
    TaskKind.EVENT.value: "E",
}


def schedule_of(task: Task) -> str:
    """Return the human-readable schedule suffix for *task* (may be empty)."""
    if task.kind == TaskKind.DEADLINE:
        return f"(by: {format_date(task.due_at)})"
    if task.kind == TaskKind.EVENT:
        return f"(from: {format_date(task.start_at)} to: {format_date(task.end_at)})"
    return ""

