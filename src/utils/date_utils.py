"""Helpers for date parsing and calendar arithmetic."""

import calendar
from datetime import date, datetime


def coerce_datetime(value) -> datetime | None:
    """Normalize a raw timestamp to datetime.

    Args:
        value: datetime, date, ISO-8601 string (``Z`` suffix allowed) or None.

    Returns:
        datetime | None: Parsed timestamp, None when missing or unparseable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None
    raw = value.strip()
    if not raw:
        return None
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return None


def to_day(value: datetime | None) -> date | None:
    """Truncate a timestamp to its calendar day."""
    if value is None:
        return None
    return value.date()


def days_in_month(year: int, month: int) -> int:
    """Return the number of days of a calendar month."""
    return calendar.monthrange(year, month)[1]


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Return (year, month) moved by ``offset`` months, rolling years."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def clamped_date(year: int, month: int, day: int) -> date:
    """Return the date for ``day`` in a month, clamped to its last day."""
    return date(year, month, min(day, days_in_month(year, month)))


__all__ = [
    "coerce_datetime",
    "to_day",
    "days_in_month",
    "shift_month",
    "clamped_date",
]
