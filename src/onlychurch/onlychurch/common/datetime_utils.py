from __future__ import annotations

from datetime import date, datetime, time


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def as_datetime(value: date | datetime | None) -> datetime | None:
    """Promote a DATE column value to midnight so it compares with DATETIME values."""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def shift_month(value: date, months: int) -> date:
    """First day of the month `months` away from `value`'s month."""
    index = value.year * 12 + (value.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)
