"""CommandExecutor: applies parsed commands to the task collection.

Pipeline per line: PARSE → MUTATE → DISPLAY → PERSIST → RESPOND.

Mutations are not transactional. If ``storage.write`` raises after the
in-memory change, the change stays and the ``StorageError`` propagates
to the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from taskctl.domain.commands import (
    AddTask,
    Command,
    DeleteTask,
    Exit,
    FindTasks,
    ListTasks,
    SetDone,
)
from taskctl.domain.parser import parse_command
from taskctl.domain.types import ErrorCode
from taskctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from taskctl.domain.task_list import TaskList
    from taskctl.domain.tasks import Task
    from taskctl.services.ports import Display, TaskStore

logger = logging.getLogger(__name__)


def _task_data(task: Task) -> dict[str, Any]:
    return task.model_dump(mode="json")


class CommandExecutor:
    """Runs commands against one owned :class:`TaskList`.

    Usage::

        executor = CommandExecutor(tasks, storage, ui)
        result = executor.run("deadline return book /by 2/12/2019 1800")
    """

    def __init__(self, tasks: TaskList, storage: TaskStore, display: Display) -> None:
        self._tasks = tasks
        self._storage = storage
        self._display = display

    @property
    def tasks(self) -> TaskList:
        return self._tasks

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def run(self, line: str) -> ServiceResult:
        """Parse *line* and execute it."""
        parsed = parse_command(line)
        if parsed.failure is not None:
            logger.debug("Rejected input %r: %s", line, parsed.failure.code)
            return ServiceResult.failure("parse", ServiceError.from_parse_failure(parsed.failure))
        assert parsed.value is not None
        return self.execute(parsed.value)

    def execute(self, command: Command) -> ServiceResult:
        """Dispatch a parsed command to its operation."""
        if isinstance(command, AddTask):
            return self.add(command.task)
        if isinstance(command, ListTasks):
            return self.list_tasks()
        if isinstance(command, SetDone):
            return self.set_done(command.index, done=command.done)
        if isinstance(command, DeleteTask):
            return self.delete(command.index)
        if isinstance(command, FindTasks):
            return self.find(command.query)
        if isinstance(command, Exit):
            return ServiceResult(ok=True, op="exit")
        msg = f"Unhandled command: {command!r}"
        raise TypeError(msg)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add(self, task: Task) -> ServiceResult:
        """Append *task*, notify the display, then persist."""
        self._tasks.add(task)
        count = self._tasks.count()
        self._display.task_added(task, count)
        self._storage.write(self._tasks)
        logger.debug("Added %s task #%d", task.kind, count)
        return ServiceResult(
            ok=True,
            op="add_task",
            data={"index": count, "count": count, "task": _task_data(task)},
        )

    def set_done(self, index: int, *, done: bool) -> ServiceResult:
        """Mark or unmark the task at 1-based *index*."""
        op = "mark_task" if done else "unmark_task"
        if not self._tasks.has_index(index):
            return self._bad_index(op, index)

        task = self._tasks.get(index)
        warnings: list[str] = []
        if task.done == done:
            state = "done" if done else "not done"
            warnings.append(f"Task {index} was already marked {state}")
        task.done = done
        self._display.task_updated(index, task)
        self._storage.write(self._tasks)
        return ServiceResult(
            ok=True,
            op=op,
            data={"index": index, "task": _task_data(task)},
            warnings=warnings,
        )

    def delete(self, index: int) -> ServiceResult:
        """Remove the task at 1-based *index*."""
        if not self._tasks.has_index(index):
            return self._bad_index("delete_task", index)

        task = self._tasks.remove(index)
        count = self._tasks.count()
        self._display.task_removed(task, count)
        self._storage.write(self._tasks)
        logger.debug("Deleted task #%d, %d left", index, count)
        return ServiceResult(
            ok=True,
            op="delete_task",
            data={"index": index, "count": count, "task": _task_data(task)},
        )

    def list_tasks(self) -> ServiceResult:
        rows = self._tasks.numbered()
        self._display.task_listing(rows)
        return ServiceResult(
            ok=True,
            op="list_tasks",
            data={"count": len(rows), "items": [_row_data(i, t) for i, t in rows]},
        )

    def find(self, query: str) -> ServiceResult:
        rows = self._tasks.find(query)
        self._display.task_listing(rows, query=query)
        return ServiceResult(
            ok=True,
            op="find_tasks",
            data={"query": query, "count": len(rows), "items": [_row_data(i, t) for i, t in rows]},
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _bad_index(self, op: str, index: int) -> ServiceResult:
        count = self._tasks.count()
        if count == 0:
            message = "There are no tasks yet."
        else:
            message = f"Task {index} does not exist. Pick a number from 1 to {count}."
        return ServiceResult.failure(
            op,
            ServiceError(
                code=ErrorCode.INVALID_INDEX.value,
                message=message,
                detail={"value": str(index), "count": count},
            ),
        )


def _row_data(index: int, task: Task) -> dict[str, Any]:
    return {"index": index, **_task_data(task)}
