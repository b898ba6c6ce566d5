"""TaskList: the ordered, in-memory task collection.

INVARIANT: Insertion order is display order. Positions exposed to users
are 1-based and always refer to the current order.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from taskctl.domain.tasks import Task


class TaskList:
    """Ordered collection of tasks owned by the running process."""

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def add(self, task: Task) -> None:
        """Append *task* at the end."""
        self._tasks.append(task)

    def count(self) -> int:
        return len(self._tasks)

    def has_index(self, index: int) -> bool:
        """Whether *index* (1-based) names an existing task."""
        return 1 <= index <= len(self._tasks)

    def get(self, index: int) -> Task:
        """Return the task at 1-based *index*.

        Raises:
            IndexError: If *index* is out of range.
        """
        if not self.has_index(index):
            msg = f"No task number {index} (have {len(self._tasks)})"
            raise IndexError(msg)
        return self._tasks[index - 1]

    def remove(self, index: int) -> Task:
        """Remove and return the task at 1-based *index*."""
        task = self.get(index)
        del self._tasks[index - 1]
        return task

    def find(self, query: str) -> list[tuple[int, Task]]:
        """Case-insensitive substring search over descriptions.

        Returns ``(index, task)`` pairs so matches keep their list numbers.
        """
        needle = query.casefold()
        return [
            (i, task)
            for i, task in enumerate(self._tasks, start=1)
            if needle in task.description.casefold()
        ]

    def numbered(self) -> list[tuple[int, Task]]:
        """All tasks paired with their 1-based numbers."""
        return list(enumerate(self._tasks, start=1))
