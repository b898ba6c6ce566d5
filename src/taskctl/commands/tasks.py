"""One-shot task commands: todo, deadline, event, list, mark, unmark, delete, find.

Each command rebuilds the free-text line (``keyword`` + arguments) and
runs it through the same parser the interactive shell uses, so
``taskctl deadline return book /by 2/12/2019 1800`` behaves exactly like
typing that line into ``taskctl shell``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from taskctl.commands._base import TaskCommand

if TYPE_CHECKING:
    from taskctl.commands._context import AppContext


def build_line(keyword: str, words: tuple[str, ...]) -> str:
    """Join CLI words back into one input line."""
    if not words:
        return keyword
    return " ".join((keyword, *words))


def _line_command(keyword: str, help_text: str, examples: str) -> click.Command:
    """Build a command that forwards its words to the line parser."""

    @click.pass_obj
    def callback(app: AppContext, words: tuple[str, ...]) -> None:
        app.emit(app.run_line(build_line(keyword, words)))

    return click.command(
        keyword,
        cls=TaskCommand,
        help=help_text,
        examples=examples,
        context_settings={"ignore_unknown_options": True},
    )(click.argument("words", nargs=-1, type=click.UNPROCESSED)(callback))


TASK_COMMANDS: list[click.Command] = [
    _line_command(
        "todo",
        "Add a todo: a task with no date.",
        "  taskctl todo read book",
    ),
    _line_command(
        "deadline",
        "Add a deadline: TASK /by d/M/yyyy HHmm.",
        "  taskctl deadline return book /by 2/12/2019 1800",
    ),
    _line_command(
        "event",
        "Add an event: TASK /from d/M/yyyy HHmm /to d/M/yyyy HHmm.",
        "  taskctl event project meeting /from 6/8/2019 1400 /to 6/8/2019 1600",
    ),
    _line_command(
        "list",
        "List all tasks with their numbers.",
        "  taskctl list\n  taskctl --json list",
    ),
    _line_command(
        "mark",
        "Mark task number N as done.",
        "  taskctl mark 2",
    ),
    _line_command(
        "unmark",
        "Mark task number N as not done.",
        "  taskctl unmark 2",
    ),
    _line_command(
        "delete",
        "Delete task number N.",
        "  taskctl delete 3",
    ),
    _line_command(
        "find",
        "List tasks whose description contains TEXT.",
        "  taskctl find book",
    ),
]
