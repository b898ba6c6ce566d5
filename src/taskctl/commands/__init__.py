"""Subcommand modules for taskctl.

Provides register_commands() which uses deferred imports to keep
``taskctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the one-shot task commands and the interactive shell."""
    from taskctl.commands.shell import shell
    from taskctl.commands.tasks import TASK_COMMANDS

    for command in TASK_COMMANDS:
        cli.add_command(command)
    cli.add_command(shell)
