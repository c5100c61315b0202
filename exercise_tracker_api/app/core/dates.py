"""
Date helpers for exercise entries.

All datetimes handled by the tracker are naive and expressed in
server‑local time.  Text supplied by clients is parsed with
``parse_date``: ISO‑8601 text goes through ``datetime.fromisoformat``,
anything else (``2020/01/01``, ``Wed Jan 01 2020``, ``January 1,
2020``) through ``dateutil``.  Aware values are converted to local time
before the timezone is dropped.  Responses render dates as calendar
strings such as ``Wed Jan 01 2020``.
"""

import re
from datetime import datetime

from dateutil import parser as date_parser

from .errors import ValidationError

# Any of ``10:30``, ``T10``, ``5pm`` / ``5 a.m.`` marks a time of day.
_TIME_PART = re.compile(r"\d:\d|T\d|\d\s*[ap]\.?m\b", re.IGNORECASE)

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def is_date_only(text: str) -> bool:
    """Return True when ``text`` names a calendar day without a time."""
    return not _TIME_PART.search(text)


def parse_date(text: str) -> datetime:
    """Parse date or date‑time text into a naive local datetime.

    Raises ``ValidationError`` if the text cannot be parsed.
    """
    value = text.strip()
    iso_value = value[:-1] + "+00:00" if value[-1:] in ("Z", "z") else value
    try:
        parsed = datetime.fromisoformat(iso_value)
    except ValueError:
        try:
            parsed = date_parser.parse(value)
        except (ValueError, OverflowError) as exc:
            raise ValidationError(f"Invalid date: {text!r}") from exc
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def end_of_day(value: datetime) -> datetime:
    return value.replace(hour=23, minute=59, second=59, microsecond=999999)


def to_date_string(value: datetime) -> str:
    """Format ``value`` as ``Www Mmm DD YYYY`` independent of the locale."""
    return f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} {value.day:02d} {value.year:04d}"
