"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns the task collection for the process: the
file is loaded lazily, on the first command that needs it, so
``--help`` and ``--version`` never touch storage.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from taskctl.config.logging import configure_logging
from taskctl.domain.types import ErrorCode
from taskctl.infrastructure.storage import StorageError, TaskStorage
from taskctl.output.ui import ConsoleUI
from taskctl.services.executor import CommandExecutor
from taskctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from taskctl.config.settings import TaskSettings

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TaskSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        self.ui = ConsoleUI(
            json_output=settings.json_output,
            quiet=settings.quiet,
            width=settings.display.width,
        )
        self.storage = TaskStorage(settings.storage_path)
        self._executor: CommandExecutor | None = None

    @property
    def executor(self) -> CommandExecutor:
        """Executor over the stored tasks (loaded on first access)."""
        if self._executor is None:
            try:
                tasks = self.storage.load()
            except StorageError as exc:
                raise click.ClickException(f"Cannot load tasks from {exc}") from exc
            self._executor = CommandExecutor(tasks, self.storage, self.ui)
        return self._executor

    def run_line(self, line: str) -> ServiceResult:
        """Run one command line, turning storage failures into a result.

        The in-memory change made before a failed write is kept.
        """
        executor = self.executor
        try:
            return executor.run(line)
        except StorageError as exc:
            logger.warning("Task file write failed: %s", exc)
            return ServiceResult.failure(
                "write_tasks",
                ServiceError(
                    code=ErrorCode.STORAGE_ERROR.value,
                    message=f"Could not save tasks: {exc}",
                    detail={"path": str(exc.path)},
                ),
            )

    def emit(self, result: ServiceResult) -> None:
        """Finish a one-shot command with the right exit semantics.

        * Success: task output was already shown by the UI; warnings
          go to stderr.
        * Failure: the error goes to stderr and the process exits 1.
        """
        if result.ok:
            self.ui.warnings(result)
            return
        self.ui.failure(result)
        raise SystemExit(1)
