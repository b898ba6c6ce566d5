"""Parsed command values produced by :mod:`taskctl.domain.parser`.

Each command is an immutable record; the executor dispatches on its type.
"""

from __future__ import annotations

from dataclasses import dataclass

from taskctl.domain.tasks import Task


@dataclass(frozen=True)
class AddTask:
    task: Task


@dataclass(frozen=True)
class ListTasks:
    pass


@dataclass(frozen=True)
class SetDone:
    """Mark (``done=True``) or unmark the task at 1-based ``index``."""

    index: int
    done: bool


@dataclass(frozen=True)
class DeleteTask:
    index: int


@dataclass(frozen=True)
class FindTasks:
    query: str


@dataclass(frozen=True)
class Exit:
    pass


Command = AddTask | ListTasks | SetDone | DeleteTask | FindTasks | Exit
