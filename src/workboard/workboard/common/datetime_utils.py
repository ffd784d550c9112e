from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from dateutil import parser as dtparser

from ..core.constants import DATE_KEY_FORMAT


def parse_iso_date(value: str) -> date:
    """Date of a ``YYYY-MM-DD`` key (strict, unlike ``to_date``)."""
    return datetime.strptime(value, DATE_KEY_FORMAT).date()


def to_date(value: Any) -> Optional[date]:
    """Calendar date of an API date value, or None when it cannot be read.

    The date is taken as written: ``2024-03-01T23:59:00Z`` and
    ``2024-03-01T00:05:00+07:00`` are both 2024-03-01. No timezone
    conversion happens, so offsets and time of day never move a value to a
    neighbouring day.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        return dtparser.isoparse(text).date()
    except (ValueError, OverflowError):
        return None


def to_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return dtparser.isoparse(value.strip())
    except (ValueError, OverflowError):
        return None


def date_key(value: Any) -> Optional[str]:
    """Normalize a date value to ``YYYY-MM-DD`` (None when unparseable)."""
    d = to_date(value)
    return d.strftime(DATE_KEY_FORMAT) if d else None


def format_long_date(d: date) -> str:
    """Long display form, e.g. ``Wednesday, January 10, 2024``."""
    return f"{d:%A}, {d:%B} {d.day}, {d.year}"


def now_local() -> datetime:
    """Naive local time, used when a caller passes no ``now``."""
    return datetime.now()
