"""Shared pytest fixtures and test doubles for taskctl tests."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from taskctl.domain.task_list import TaskList
from taskctl.domain.tasks import Deadline, Event, Task, Todo
from taskctl.infrastructure.storage import StorageError
from taskctl.services.executor import CommandExecutor

DUE = datetime(2019, 12, 2, 18, 0)
START = datetime(2019, 8, 6, 14, 0)
END = datetime(2019, 8, 6, 16, 0)


class RecordingDisplay:
    """Display double that records every notification."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[object, ...]]] = []

    def task_added(self, task: Task, count: int) -> None:
        self.calls.append(("task_added", (task, count)))

    def task_updated(self, index: int, task: Task) -> None:
        self.calls.append(("task_updated", (index, task)))

    def task_removed(self, task: Task, count: int) -> None:
        self.calls.append(("task_removed", (task, count)))

    def task_listing(self, rows: list[tuple[int, Task]], *, query: str | None = None) -> None:
        self.calls.append(("task_listing", (rows, query)))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


class RecordingStore:
    """TaskStore double that snapshots each write, optionally failing."""

    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.writes: list[list[Task]] = []

    def write(self, tasks: TaskList) -> None:
        if self.fail:
            raise StorageError(Path("tasks.yaml"), "disk full")
        self.writes.append(list(tasks))


@pytest.fixture(autouse=True)
def _no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's TASKCTL_* environment out of tests."""
    monkeypatch.delenv("TASKCTL_CONFIG", raising=False)
    monkeypatch.delenv("TASKCTL_STORAGE__PATH", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Empty directory used as the data root for a test."""
    return tmp_path


@pytest.fixture
def _isolated_root(data_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp data root so the CLI writes there.

    Use via ``@pytest.mark.usefixtures("_isolated_root")``.
    """
    monkeypatch.chdir(data_root)


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def failing_store() -> RecordingStore:
    return RecordingStore(fail=True)


@pytest.fixture
def sample_tasks() -> TaskList:
    """Three tasks, one of each kind, the deadline already done."""
    return TaskList(
        [
            Todo(description="read book"),
            Deadline(description="return book", due_at=DUE, done=True),
            Event(description="project meeting", start_at=START, end_at=END),
        ]
    )


@pytest.fixture
def executor(
    sample_tasks: TaskList, store: RecordingStore, display: RecordingDisplay
) -> CommandExecutor:
    return CommandExecutor(sample_tasks, store, display)
