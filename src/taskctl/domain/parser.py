"""Free-text command parsing.

Turns one raw input line into either a task/command value or a
:class:`ParseFailure`. Parsing never raises for bad input and has no
side effects; the failure carries the code plus the keyword, field,
value, or usage hint needed to explain it.

Marker handling (``/by ``, ``/from ``, ``/to ``):

- Markers are found by literal search; only the first occurrence counts.
- Presence (and, for events, ordering) is checked before any slicing.
- The description runs from after ``keyword + " "`` up to the marker,
  minus the single space in front of the marker.
- Date text is everything after the marker token, which already
  includes the marker's trailing space.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from taskctl.domain.commands import (
    AddTask,
    Command,
    DeleteTask,
    Exit,
    FindTasks,
    ListTasks,
    SetDone,
)
from taskctl.domain.dates import DateParseError, parse_date
from taskctl.domain.tasks import Deadline, Event, Task, Todo
from taskctl.domain.types import ErrorCode, TaskKind

T = TypeVar("T")

BY_MARKER = "/by "
FROM_MARKER = "/from "
TO_MARKER = "/to "

DEADLINE_USAGE = "deadline [task] /by [date]"
EVENT_USAGE = "event [task] /from [startDate] /to [endDate]"

TASK_NAME = "Task Name"
START_DATE = "Start Date"
END_DATE = "End Date"


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParseFailure:
    """Why a line could not be parsed."""

    code: ErrorCode
    message: str
    detail: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a parsed ``value`` or a ``failure``, never both."""

    value: T | None = None
    failure: ParseFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def _success(value: T) -> ParseResult[T]:
    return ParseResult(value=value)


def _fail(code: ErrorCode, message: str, **detail: str) -> ParseResult[T]:
    return ParseResult(failure=ParseFailure(code=code, message=message, detail=detail))


def _no_description(keyword: str) -> ParseResult[T]:
    return _fail(
        ErrorCode.NO_DESCRIPTION,
        f"The description of a {keyword} cannot be empty.",
        keyword=keyword,
    )


def _insufficient(keyword: str, usage: str) -> ParseResult[T]:
    return _fail(
        ErrorCode.INSUFFICIENT_ARGUMENTS,
        f"Not enough arguments for {keyword}. Usage: {usage}",
        keyword=keyword,
        usage=usage,
    )


def _empty(field_name: str) -> ParseResult[T]:
    return _fail(
        ErrorCode.EMPTY_ARGUMENT,
        f"{field_name} cannot be empty.",
        field=field_name,
    )


def _invalid_date(text: str) -> ParseResult[T]:
    return _fail(
        ErrorCode.INVALID_DATE,
        f"Invalid date: {text!r}. Use d/M/yyyy HHmm, e.g. 2/12/2019 1800.",
        value=text,
    )


def _unknown() -> ParseResult[T]:
    return _fail(ErrorCode.UNKNOWN_INPUT, "Sorry, I don't know what that means.")


# ---------------------------------------------------------------------------
# Tokenizer helpers
# ---------------------------------------------------------------------------


def _arguments(keyword: str, line: str) -> str | None:
    """Return the text after ``keyword + " "``.

    A bare keyword yields ``""``. ``None`` means *line* does not start
    with *keyword* as a whole word.
    """
    if line == keyword:
        return ""
    prefix = keyword + " "
    if not line.startswith(prefix):
        return None
    return line[len(prefix) :]


def _find_marker(text: str, marker: str) -> int | None:
    """Offset of the first *marker* in *text*, or None."""
    idx = text.find(marker)
    return idx if idx >= 0 else None


def _before(text: str, end: int) -> str:
    """``text[:end]`` without the one separating space before a marker."""
    segment = text[: max(end, 0)]
    if segment.endswith(" "):
        segment = segment[:-1]
    return segment


def _blank(text: str) -> bool:
    return not text.strip()


# ---------------------------------------------------------------------------
# Task parsing
# ---------------------------------------------------------------------------


def _parse_todo(keyword: str, args: str) -> ParseResult[Task]:
    if _blank(args):
        return _no_description(keyword)
    return _success(Todo(description=args))


def _parse_deadline(keyword: str, args: str) -> ParseResult[Task]:
    by_idx = _find_marker(args, BY_MARKER)
    if by_idx is None:
        return _insufficient(keyword, DEADLINE_USAGE)

    description = _before(args, by_idx)
    date_text = args[by_idx + len(BY_MARKER) :]

    if _blank(description):
        return _empty(TASK_NAME)
    if _blank(date_text):
        return _empty(START_DATE)

    try:
        due_at = parse_date(date_text)
    except DateParseError:
        return _invalid_date(date_text)

    return _success(Deadline(description=description, due_at=due_at))


def _parse_event(keyword: str, args: str) -> ParseResult[Task]:
    from_idx = _find_marker(args, FROM_MARKER)
    to_idx = _find_marker(args, TO_MARKER)
    if from_idx is None or to_idx is None or to_idx < from_idx:
        return _insufficient(keyword, EVENT_USAGE)

    start_from = from_idx + len(FROM_MARKER)
    description = _before(args, from_idx)
    start_text = _before(args[start_from:], to_idx - start_from)
    end_text = args[to_idx + len(TO_MARKER) :]

    if _blank(description):
        return _empty(TASK_NAME)
    if _blank(start_text):
        return _empty(START_DATE)
    if _blank(end_text):
        return _empty(END_DATE)

    try:
        start_at = parse_date(start_text)
    except DateParseError:
        return _invalid_date(start_text)
    try:
        end_at = parse_date(end_text)
    except DateParseError:
        return _invalid_date(end_text)

    if end_at < start_at:
        return _fail(
            ErrorCode.INVALID_DATE_RANGE,
            f"Event ends ({end_text}) before it starts ({start_text}).",
            start=start_text,
            end=end_text,
        )

    return _success(Event(description=description, start_at=start_at, end_at=end_at))


_TASK_PARSERS: dict[str, Callable[[str, str], ParseResult[Task]]] = {
    TaskKind.TODO.value: _parse_todo,
    TaskKind.DEADLINE.value: _parse_deadline,
    TaskKind.EVENT.value: _parse_event,
}


def parse_task(keyword: str, line: str) -> ParseResult[Task]:
    """Build a task from *line*, the full input including *keyword*.

    Examples:
        >>> parse_task("todo", "todo read book").value.description
        'read book'
        >>> parse_task("todo", "todo").failure.code == ErrorCode.NO_DESCRIPTION
        True
    """
    parser = _TASK_PARSERS.get(keyword)
    if parser is None:
        return _unknown()
    if line == keyword:
        return _no_description(keyword)
    args = _arguments(keyword, line)
    if args is None:
        return _unknown()
    return parser(keyword, args)


# ---------------------------------------------------------------------------
# Full command parsing
# ---------------------------------------------------------------------------


def split_keyword(line: str) -> str:
    """The keyword is everything up to the first space."""
    return line.partition(" ")[0]


def _parse_index(keyword: str, args: str) -> ParseResult[int]:
    text = args.strip()
    if not text:
        return _fail(
            ErrorCode.NO_DESCRIPTION,
            f"Which task? Usage: {keyword} [task number]",
            keyword=keyword,
        )
    # int() would also take "1_0", "+2" and non-ASCII digits.
    index = int(text) if text.isascii() and text.isdigit() else 0
    if index < 1:
        return _fail(
            ErrorCode.INVALID_INDEX,
            f"{text!r} is not a valid task number.",
            value=text,
        )
    return _success(index)


def parse_command(line: str) -> ParseResult[Command]:
    """Parse one input line into a :data:`Command`."""
    keyword = split_keyword(line)
    args = _arguments(keyword, line) or ""

    if keyword in _TASK_PARSERS:
        parsed = parse_task(keyword, line)
        if parsed.failure is not None:
            return ParseResult(failure=parsed.failure)
        assert parsed.value is not None
        return _success(AddTask(task=parsed.value))

    if keyword in ("mark", "unmark", "delete"):
        index = _parse_index(keyword, args)
        if index.failure is not None:
            return ParseResult(failure=index.failure)
        assert index.value is not None
        if keyword == "delete":
            return _success(DeleteTask(index=index.value))
        return _success(SetDone(index=index.value, done=keyword == "mark"))

    if keyword == "find":
        if _blank(args):
            return _no_description(keyword)
        return _success(FindTasks(query=args.strip()))

    if keyword == "list" and _blank(args):
        return _success(ListTasks())
    if keyword == "bye" and _blank(args):
        return _success(Exit())

    return _unknown()
