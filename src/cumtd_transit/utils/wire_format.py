"""Text encodings shared by request building and response decoding."""

import re
from datetime import date, datetime
from decimal import Decimal

from ..core.exceptions import FormatError

_WIRE_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def format_decimal(value: int | float) -> str:
    """Render a number as positional decimal text.

    ``str(1e-05)`` gives scientific notation; the service expects plain
    digits, so floats go through ``Decimal`` of their shortest repr.
    """
    if isinstance(value, bool):
        raise TypeError("Boolean is not a numeric query value")
    if isinstance(value, int):
        return str(value)
    return format(Decimal(repr(value)), "f")


def format_wire_date(value: date) -> str:
    """Format a calendar date as ``YYYY-MM-DD``.

    Raises:
        FormatError: If the value is not a plain calendar date
    """
    if isinstance(value, datetime) or not isinstance(value, date):
        raise FormatError(
            f"Unable to format an input date string: {value!r} is not a calendar date"
        )
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_wire_date(text: str) -> date:
    """Parse ``YYYY-MM-DD`` text into a date.

    Raises:
        ValueError: If the text is not a valid calendar date
    """
    if not isinstance(text, str) or not _WIRE_DATE_PATTERN.fullmatch(text):
        raise ValueError(f"Invalid date text: {text!r}, expected YYYY-MM-DD")
    return date.fromisoformat(text)
