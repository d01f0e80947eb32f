"""Month-key derivation and calendar arithmetic for lease schedules."""

import calendar
from datetime import date, datetime
from typing import Any, Iterator

from propledger.exceptions import InvalidInputError


def parse_date(value: Any) -> date | None:
    """Coerce a date, datetime or ISO-8601 string to a date.

    Returns ``None`` for anything unusable so aggregations can skip the
    record instead of failing.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return None


def as_today(today: date | datetime | None = None) -> date:
    """Resolve the injected "today", falling back to the system clock."""
    if today is None:
        return date.today()
    if isinstance(today, datetime):
        return today.date()
    return today


def month_key(value: Any) -> str:
    """Format a date's year and month as ``YYYY-MM``.

    Raises
    ------
    InvalidInputError
        If ``value`` cannot be read as a date.
    """
    d = parse_date(value)
    if d is None:
        raise InvalidInputError(f"Cannot derive a month key from {value!r}")
    return f"{d.year:04d}-{d.month:02d}"


def year_key(value: Any) -> str:
    d = parse_date(value)
    if d is None:
        raise InvalidInputError(f"Cannot derive a year key from {value!r}")
    return f"{d.year:04d}"


def first_of_month(d: date) -> date:
    return d.replace(day=1)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> date:
    """Build a date, pulling ``day`` back to the month's last day if needed.

    Day 30 in February lands on the 28th (or 29th in leap years).
    """
    return date(year, month, min(day, days_in_month(year, month)))


def add_months(d: date, months: int) -> date:
    """Shift ``d`` by whole months, clamping the day to the target month."""
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    return clamp_day(year, month + 1, d.day)


def months_between(start: date, end: date) -> int:
    """Whole calendar months from ``start`` to ``end``, ignoring days."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def iter_months(start: date, end: date) -> Iterator[date]:
    """Yield the first day of every month from ``start`` to ``end`` inclusive."""
    current = first_of_month(start)
    last = first_of_month(end)
    while current <= last:
        yield current
        current = add_months(current, 1)
