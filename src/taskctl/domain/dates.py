"""Date parsing for deadline and event markers.

One fixed input format, no relative dates, no timezone handling. All
values are naive local datetimes.
"""

from __future__ import annotations

import re
from datetime import datetime

# d/M/yyyy HHmm, e.g. "2/12/2019 1800"
DATE_INPUT_FORMAT = "%d/%m/%Y %H%M"
DATE_DISPLAY_FORMAT = "%b %d %Y %H:%M"

# strptime tolerates padded and short fields; the shape check does not.
_INPUT_SHAPE = re.compile(r"\d{1,2}/\d{1,2}/\d{4} \d{4}")


class DateParseError(ValueError):
    """Raised when a string does not match :data:`DATE_INPUT_FORMAT`."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Not a valid date: {text!r} (expected d/M/yyyy HHmm)")
        self.text = text


def parse_date(text: str) -> datetime:
    """Parse *text* in the ``d/M/yyyy HHmm`` format.

    Raises:
        DateParseError: On wrong length, separators, non-numeric fields,
            or out-of-range components (e.g. ``31/2/2024 0900``).
    """
    if _INPUT_SHAPE.fullmatch(text) is None:
        raise DateParseError(text)
    try:
        return datetime.strptime(text, DATE_INPUT_FORMAT)
    except ValueError as exc:
        raise DateParseError(text) from exc


def format_date(value: datetime) -> str:
    """Render a datetime for display (``Dec 02 2019 18:00``)."""
    return value.strftime(DATE_DISPLAY_FORMAT)
