"""Tests for the task variant models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from taskctl.domain.tasks import (
    TASK_ADAPTER,
    Deadline,
    Event,
    Todo,
    schedule_of,
)
from taskctl.domain.types import TaskKind

DUE = datetime(2019, 12, 2, 18, 0)


class TestTaskVariants:
    def test_todo_defaults(self) -> None:
        task = Todo(description="read book")
        assert task.kind == TaskKind.TODO
        assert task.done is False

    def test_deadline_fields(self) -> None:
        task = Deadline(description="return book", due_at=DUE)
        assert task.kind == TaskKind.DEADLINE
        assert task.due_at == DUE

    def test_event_fields(self) -> None:
        task = Event(description="meeting", start_at=DUE, end_at=DUE)
        assert task.kind == TaskKind.EVENT
        assert (task.start_at, task.end_at) == (DUE, DUE)

    def test_empty_description_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Todo(description="")

    def test_description_is_immutable(self) -> None:
        task = Todo(description="read book")
        with pytest.raises(ValidationError):
            task.description = "other"  # type: ignore[misc]

    def test_done_is_mutable(self) -> None:
        task = Todo(description="read book")
        task.done = True
        assert task.done is True


class TestTaskAdapter:
    def test_dispatches_on_kind(self) -> None:
        task = TASK_ADAPTER.validate_python(
            {"kind": "deadline", "description": "x", "due_at": "2019-12-02T18:00:00"}
        )
        assert isinstance(task, Deadline)
        assert task.due_at == DUE

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TASK_ADAPTER.validate_python({"kind": "chore", "description": "x"})

    def test_missing_variant_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TASK_ADAPTER.validate_python({"kind": "event", "description": "x"})


class TestScheduleOf:
    def test_todo_has_none(self) -> None:
        assert schedule_of(Todo(description="x")) == ""

    def test_deadline(self) -> None:
        assert schedule_of(Deadline(description="x", due_at=DUE)) == "(by: Dec 02 2019 18:00)"

    def test_event(self) -> None:
        end = datetime(2019, 12, 2, 20, 30)
        task = Event(description="x", start_at=DUE, end_at=end)
        assert schedule_of(task) == "(from: Dec 02 2019 18:00 to: Dec 02 2019 20:30)"
