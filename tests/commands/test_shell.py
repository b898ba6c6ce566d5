"""Tests for the interactive shell command."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from taskctl.cli import cli
from taskctl.infrastructure.storage import TaskStorage


def _session(runner: CliRunner, *lines: str, args: tuple[str, ...] = ()) -> str:
    result = runner.invoke(cli, [*args, "shell"], input="".join(f"{line}\n" for line in lines))
    assert result.exit_code == 0, result.output
    return result.output


@pytest.mark.usefixtures("_isolated_root")
class TestShell:
    def test_greets_and_says_goodbye(self, cli_runner: CliRunner) -> None:
        output = _session(cli_runner, "bye")
        assert "Hello! I'm taskctl." in output
        assert "Bye. Hope to see you again soon!" in output

    def test_full_session(self, cli_runner: CliRunner, data_root: Path) -> None:
        output = _session(
            cli_runner,
            "todo read book",
            "deadline return book /by 2/12/2019 1800",
            "event meeting /from 6/8/2019 1400 /to 6/8/2019 1600",
            "mark 1",
            "list",
            "bye",
        )
        assert "Now you have 3 tasks in the list." in output
        assert "1.[T][X] read book" in output
        assert "2.[D][ ] return book (by: Dec 02 2019 18:00)" in output
        stored = list(TaskStorage(data_root / ".taskctl" / "tasks.yaml").load())
        assert [t.kind for t in stored] == ["todo", "deadline", "event"]
        assert stored[0].done is True

    def test_failures_do_not_end_session(self, cli_runner: CliRunner) -> None:
        output = _session(cli_runner, "blah", "todo", "deadline x /by ", "todo ok", "bye")
        assert "Sorry, I don't know what that means." in output
        assert "The description of a todo cannot be empty." in output
        assert "Start Date cannot be empty." in output
        assert "Now you have 1 task in the list." in output

    def test_trailing_space_is_kept(self, cli_runner: CliRunner) -> None:
        # "/by " only counts as a marker with its trailing space intact.
        output = _session(cli_runner, "deadline x /by ", "deadline x /by")
        assert "Start Date cannot be empty." in output
        assert "Not enough arguments for deadline." in output

    def test_blank_lines_ignored(self, cli_runner: CliRunner) -> None:
        output = _session(cli_runner, "", "   ", "list", "bye")
        assert "Your task list is empty." in output
        assert "ERROR" not in output

    def test_end_of_input_exits(self, cli_runner: CliRunner) -> None:
        output = _session(cli_runner, "todo no bye")
        assert "Bye. Hope to see you again soon!" in output

    def test_stops_reading_after_bye(self, cli_runner: CliRunner, data_root: Path) -> None:
        _session(cli_runner, "bye", "todo never")
        assert not (data_root / ".taskctl" / "tasks.yaml").exists()

    def test_greeting_disabled_by_config(self, cli_runner: CliRunner, data_root: Path) -> None:
        (data_root / "taskctl.toml").write_text("[display]\ngreeting = false\n")
        output = _session(cli_runner, "bye")
        assert "Hello!" not in output

    def test_already_done_warning(self, cli_runner: CliRunner) -> None:
        output = _session(cli_runner, "todo x", "mark 1", "mark 1", "bye")
        assert "WARNING: Task 1 was already marked done" in output

    def test_corrupt_file_aborts_before_greeting(
        self, cli_runner: CliRunner, data_root: Path
    ) -> None:
        path = data_root / ".taskctl" / "tasks.yaml"
        path.parent.mkdir()
        path.write_text("tasks: [broken\n")
        result = cli_runner.invoke(cli, ["shell"], input="bye\n")
        assert result.exit_code == 1
        assert "Hello!" not in result.output
