"""YAML file storage for the task collection.

INVARIANT: The file is rewritten whole on every write. Each call opens,
writes, and closes it; no handle outlives a call.

Layout::

    version: 1
    tasks:
      - kind: deadline
        description: return book
        done: false
        due_at: '2019-12-02T18:00:00'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from taskctl.domain.task_list import TaskList
from taskctl.domain.tasks import TASK_LIST_ADAPTER

logger = logging.getLogger(__name__)

STORAGE_VERSION = 1


class StorageError(Exception):
    """The task file could not be read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def _new_yaml() -> YAML:
    """Fresh YAML instance per call (ruamel's emitter is stateful)."""
    y = YAML()
    y.default_flow_style = False
    return y


class TaskStorage:
    """Reads and writes a :class:`TaskList` to a single YAML file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskList:
        """Load the collection. A missing file is an empty collection.

        Raises:
            StorageError: On I/O failure or a malformed file.
        """
        if not self._path.exists():
            logger.debug("No task file at %s, starting empty", self._path)
            return TaskList()

        try:
            text = self._path.read_text(encoding="utf-8")
            raw: Any = _new_yaml().load(text)
        except OSError as exc:
            raise StorageError(self._path, f"cannot read ({exc.strerror or exc})") from exc
        except UnicodeDecodeError as exc:
            raise StorageError(self._path, f"not valid UTF-8 ({exc.reason})") from exc
        except YAMLError as exc:
            raise StorageError(self._path, f"invalid YAML ({exc})") from exc

        if raw is None:
            return TaskList()
        if not isinstance(raw, dict) or not isinstance(raw.get("tasks", []), list):
            raise StorageError(self._path, "expected a mapping with a 'tasks' list")

        try:
            tasks = TASK_LIST_ADAPTER.validate_python(list(raw.get("tasks") or []))
        except ValidationError as exc:
            count = exc.error_count()
            raise StorageError(self._path, f"{count} invalid task record(s)") from exc

        logger.debug("Loaded %d task(s) from %s", len(tasks), self._path)
        return TaskList(tasks)

    def write(self, tasks: TaskList) -> None:
        """Persist the full collection, replacing the file.

        Raises:
            StorageError: If the file or its directory cannot be written.
        """
        data = {
            "version": STORAGE_VERSION,
            "tasks": TASK_LIST_ADAPTER.dump_python(list(tasks), mode="json"),
        }
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as fh:
                _new_yaml().dump(data, fh)
        except OSError as exc:
            raise StorageError(self._path, f"cannot write ({exc.strerror or exc})") from exc

        logger.debug("Wrote %d task(s) to %s", len(tasks), self._path)
