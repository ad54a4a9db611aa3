"""
Parsing and formatting helpers for request values.

Form bodies and query strings deliver everything as text, while JSON
bodies may carry numbers.  These helpers accept either and apply the
same loose rules to both.
"""

import math
import re
from datetime import date, datetime, timezone
from typing import Any, Optional

from .errors import ValidationError


# Human readable calendar format used in responses, e.g. ``Mon Jan 01 2024``.
CALENDAR_FORMAT = "%a %b %d %Y"

_EXTRA_FORMATS = (CALENDAR_FORMAT, "%b %d %Y", "%d %b %Y", "%Y/%m/%d")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# Largest integer the SQLite INTEGER type can hold.
MAX_INTEGER = 2**63 - 1


def format_calendar_date(value: date) -> str:
    """Render a date as ``Mon Jan 01 2024``; the year is always four digits."""
    return f"{value:%a %b %d} {value.year:04d}"


def today() -> date:
    """Return the current calendar day in UTC."""
    return datetime.now(timezone.utc).date()


def parse_calendar_date(value: Any) -> date:
    """Parse ``value`` into a calendar date.

    Accepts ISO dates (``2024-01-15``), ISO datetimes (the date part is
    taken after converting to UTC when an offset is given) and the
    response format itself, so a rendered date parses back to the same
    day.  Raises ``ValidationError("Invalid date")`` otherwise.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Invalid date")

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        parsed = None
    if parsed is not None:
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc)
        return parsed.date()
    for fmt in _EXTRA_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValidationError("Invalid date")


def parse_leading_int(value: Any) -> Optional[int]:
    """Read an integer the way a lenient form parser would.

    Integers pass through, floats are truncated and strings contribute
    their leading integer (``"30"``, ``"30.9"`` and ``" 30min"`` all give
    ``30``).  Returns ``None`` when no integer can be read.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))
