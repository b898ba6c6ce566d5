"""ConsoleUI: the Display collaborator used by the CLI.

Notifications are rendered with Rich into a buffer and written with
``click.echo`` so Click's test runner and pipes see the same text.

Modes:
- Human (default): friendly sentences plus one styled line per task.
- ``--json``: one JSON document per notification on stdout.
- ``--quiet``: confirmations are suppressed; listings print bare lines.

Failures and warnings always go to stderr.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from rich.text import Text

from taskctl.domain.tasks import KIND_ICONS, schedule_of
from taskctl.output.console import create_console, get_output, style_for_kind
from taskctl.output.formatters import format_event, format_failure, task_payload

if TYPE_CHECKING:
    from taskctl.domain.tasks import Task
    from taskctl.services.result import ServiceResult


def _plural(count: int) -> str:
    return f"{count} task" if count == 1 else f"{count} tasks"


class ConsoleUI:
    """Renders task events for a terminal, a pipe, or a JSON consumer."""

    def __init__(
        self,
        *,
        json_output: bool = False,
        quiet: bool = False,
        width: int | None = None,
    ) -> None:
        self.json_output = json_output
        self.quiet = quiet
        self.width = width

    # ------------------------------------------------------------------
    # Display protocol
    # ------------------------------------------------------------------

    def task_added(self, task: Task, count: int) -> None:
        if self.json_output:
            self._echo(format_event("task_added", task=task_payload(task), count=count))
            return
        if self.quiet:
            return
        self._render(
            Text("Got it. I've added this task:"),
            self._task_line(task, indent=2),
            Text(f"Now you have {_plural(count)} in the list."),
        )

    def task_updated(self, index: int, task: Task) -> None:
        if self.json_output:
            self._echo(format_event("task_updated", task=task_payload(task, index=index)))
            return
        if self.quiet:
            return
        if task.done:
            header = Text("Nice! I've marked this task as done:", style="task.ok")
        else:
            header = Text("OK, I've marked this task as not done yet:")
        self._render(header, self._task_line(task, indent=2))

    def task_removed(self, task: Task, count: int) -> None:
        if self.json_output:
            self._echo(format_event("task_removed", task=task_payload(task), count=count))
            return
        if self.quiet:
            return
        self._render(
            Text("Noted. I've removed this task:"),
            self._task_line(task, indent=2),
            Text(f"Now you have {_plural(count)} in the list."),
        )

    def task_listing(self, rows: list[tuple[int, Task]], *, query: str | None = None) -> None:
        if self.json_output:
            items = [task_payload(task, index=i) for i, task in rows]
            payload: dict[str, object] = {"count": len(rows), "items": items}
            if query is not None:
                payload["query"] = query
            self._echo(format_event("task_listing", **payload))
            return

        lines = [self._task_line(task, index=i) for i, task in rows]
        if self.quiet:
            if lines:
                self._render(*lines)
            return

        if not rows:
            empty = "Your task list is empty." if query is None else f"No tasks match {query!r}."
            self._render(Text(empty, style="task.pending"))
            return
        header = (
            "Here are the tasks in your list:"
            if query is None
            else "Here are the matching tasks in your list:"
        )
        self._render(Text(header), *lines)

    # ------------------------------------------------------------------
    # Session messages
    # ------------------------------------------------------------------

    def greeting(self) -> None:
        if self.json_output or self.quiet:
            return
        self._render(Text("Hello! I'm taskctl.", style="bold"), Text("What can I do for you?"))

    def goodbye(self) -> None:
        if self.json_output or self.quiet:
            return
        self._render(Text("Bye. Hope to see you again soon!"))

    def failure(self, result: ServiceResult) -> None:
        """Report a failed result on stderr."""
        click.echo(format_failure(result, json_output=self.json_output), err=True)

    def warnings(self, result: ServiceResult) -> None:
        # In JSON mode warnings travel inside the result, not as loose lines.
        if self.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)

    # ------------------------------------------------------------------
    # Rendering helpers
    # ------------------------------------------------------------------

    def _task_line(self, task: Task, *, index: int | None = None, indent: int = 0) -> Text:
        """``1.[D][X] return book (by: Dec 02 2019 18:00)`` with styles."""
        line = Text(" " * indent)
        if index is not None:
            line.append(f"{index}.", style="task.index")
        line.append(f"[{KIND_ICONS[task.kind]}]", style=style_for_kind(task.kind))
        if task.done:
            line.append("[X]", style="task.done")
        else:
            line.append("[ ]", style="task.pending")
        line.append(f" {task.description}")
        schedule = schedule_of(task)
        if schedule:
            line.append(f" {schedule}", style="task.schedule")
        return line

    def _render(self, *lines: Text) -> None:
        console = create_console(width=self.width)
        for line in lines:
            console.print(line)
        self._echo(get_output(console).rstrip("\n"))

    def _echo(self, text: str) -> None:
        click.echo(text)
