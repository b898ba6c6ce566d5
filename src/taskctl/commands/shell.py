"""Command: interactive session reading one command per line."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from taskctl.commands._base import TaskCommand

if TYPE_CHECKING:
    from taskctl.commands._context import AppContext

PROMPT = "> "


@click.command(
    cls=TaskCommand,
    examples="""\
  taskctl shell
  printf 'todo read book\\nlist\\nbye\\n' | taskctl shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Start an interactive session. Type 'bye' to quit.

    A failed command is reported and the session carries on.
    """
    stream = sys.stdin
    interactive = stream.isatty()
    # Load up front so a broken task file is reported before the greeting.
    _ = app.executor
    if app.settings.display.greeting:
        app.ui.greeting()

    while True:
        if interactive:
            click.echo(PROMPT, nl=False)
        raw = stream.readline()
        if not raw:
            break
        # Only the newline is stripped: trailing spaces are significant to markers.
        line = raw.rstrip("\r\n").lstrip()
        if not line.strip():
            continue

        result = app.run_line(line)
        if not result.ok:
            app.ui.failure(result)
            continue
        app.ui.warnings(result)
        if result.op == "exit":
            break

    app.ui.goodbye()
