"""Task kinds and error codes shared across layers."""

from __future__ import annotations

from enum import StrEnum


class TaskKind(StrEnum):
    """The three task variants. Values double as the add-command keywords."""

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"


class ErrorCode(StrEnum):
    """Machine-readable failure codes for parse and service results."""

    NO_DESCRIPTION = "NO_DESCRIPTION"
    INSUFFICIENT_ARGUMENTS = "INSUFFICIENT_ARGUMENTS"
    EMPTY_ARGUMENT = "EMPTY_ARGUMENT"
    INVALID_DATE = "INVALID_DATE"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    INVALID_INDEX = "INVALID_INDEX"
    UNKNOWN_INPUT = "UNKNOWN_INPUT"
    STORAGE_ERROR = "STORAGE_ERROR"
