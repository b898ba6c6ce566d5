"""Collaborator interfaces consumed by the executor.

The executor depends on these Protocols rather than on the YAML store or
the Rich console, so tests can pass in recording fakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from taskctl.domain.task_list import TaskList
    from taskctl.domain.tasks import Task


class TaskStore(Protocol):
    """Persists the whole collection. Raises ``StorageError`` on failure."""

    def write(self, tasks: TaskList) -> None: ...


class Display(Protocol):
    """Notification sink for task events. Nothing is returned."""

    def task_added(self, task: Task, count: int) -> None: ...

    def task_updated(self, index: int, task: Task) -> None: ...

    def task_removed(self, task: Task, count: int) -> None: ...

    def task_listing(self, rows: list[tuple[int, Task]], *, query: str | None = None) -> None: ...
