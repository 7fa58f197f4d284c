"""Calendar helpers shared by the domain and the workbook store."""

import calendar
from datetime import date, datetime


def coerce_date(value) -> date | None:
    """Normalize a raw cell or field value into a date.

    Args:
        value: ``date``, ``datetime`` or ISO formatted string.

    Returns:
        date | None: Parsed date, or None when missing or unparseable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            return None
        try:
            return date.fromisoformat(cleaned[:10])
        except ValueError:
            return None
    return None


def month_end(year: int, month: int) -> date:
    """Return the last calendar day of a month."""
    return date(year, month, calendar.monthrange(year, month)[1])


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Move a (year, month) pair by ``offset`` months."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def trailing_months(reference: date, count: int) -> list[tuple[int, int]]:
    """Return ``count`` (year, month) pairs ending at ``reference``'s month.

    Args:
        reference: Date whose month closes the window.
        count: Number of months in the window.

    Returns:
        list[tuple[int, int]]: Months ordered oldest first.
    """
    return [
        shift_month(reference.year, reference.month, -offset)
        for offset in range(count - 1, -1, -1)
    ]


__all__ = ["coerce_date", "month_end", "shift_month", "trailing_months"]
