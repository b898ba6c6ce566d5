"""Rich Console factory and theme for taskctl output.

Creates Console instances that render to a StringIO buffer so callers
can route the text through ``click.echo``. In non-TTY environments
(tests, pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TASKCTL_THEME = Theme(
    {
        "task.ok": "bold green",
        "task.error": "bold red",
        "task.warning": "bold yellow",
        "task.index": "bold blue",
        "task.done": "green",
        "task.pending": "dim",
        "task.schedule": "cyan",
        "task.kind.todo": "yellow",
        "task.kind.deadline": "magenta",
        "task.kind.event": "blue",
    }
)

_KIND_STYLES: dict[str, str] = {
    "todo": "task.kind.todo",
    "deadline": "task.kind.deadline",
    "event": "task.kind.event",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TASKCTL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a task kind."""
    return _KIND_STYLES.get(kind, "")
