"""Calendar helpers for debit scheduling.

Pure Python, ``datetime.date`` only. Implements:
- DD/MM/YYYY parsing and formatting (the only format the agents type)
- Month arithmetic with day clamping (31/01 + 1 month → 28/02 or 29/02)
- Day-of-month placement clamped to the month's length
- Whole-day distances between two dates

No holiday calendar: every day is a debit day.
"""

from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime

# Rendered in place of a missing date
DATE_PLACEHOLDER = "—"


def _as_date(value: date) -> date:
    """Drop the time-of-day part of a datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


def _days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def parse_date_dmy(text: str | None) -> date | None:
    """Parse a ``jj/mm/aaaa`` string into a date.

    Lenient: returns None instead of raising. A component that is missing,
    not an integer, or zero counts as absent, so ``"00/03/2025"`` is None.
    Impossible dates such as ``"31/02/2025"`` are None as well.

    Args:
        text: Raw field value, e.g. "05/03/2025".

    Returns:
        The parsed date, or None.
    """
    if not text:
        return None

    parts = text.split("/")
    if len(parts) < 3:
        return None

    try:
        day, month, year = (int(p) for p in parts[:3])
    except ValueError:
        return None

    if day <= 0 or month <= 0 or year <= 0:
        return None

    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_date_dmy(value: date | None) -> str:
    """Format as DD/MM/YYYY, or a dash when the date is missing."""
    if value is None:
        return DATE_PLACEHOLDER
    value = _as_date(value)
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def month_start(value: date) -> date:
    """First day of the date's month."""
    return date(value.year, value.month, 1)


def end_of_month(value: date) -> date:
    """Last calendar day of the date's month."""
    return date(value.year, value.month, _days_in_month(value.year, value.month))


def add_months(value: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the target month.

    ``add_months(date(2025, 1, 31), 1)`` is 28/02/2025, never 03/03/2025.
    """
    value = _as_date(value)
    index = value.month - 1 + months
    year = value.year + index // 12
    month = index % 12 + 1
    day = min(value.day, _days_in_month(year, month))
    return date(year, month, day)


def set_day_of_month(value: date, day: int) -> date:
    """Same month and year, with the day clamped to [1, last day of month]."""
    value = _as_date(value)
    last = _days_in_month(value.year, value.month)
    return date(value.year, value.month, max(1, min(day, last)))


def days_between(start: date, end: date) -> int:
    """Signed number of whole days from ``start`` to ``end``."""
    return (_as_date(end) - _as_date(start)).days
