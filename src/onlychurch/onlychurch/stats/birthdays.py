from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Generic, Iterable, Optional, TypeVar

from .aggregator import age_in_years

T = TypeVar("T")


@dataclass(frozen=True)
class BirthdayEntry(Generic[T]):
    record: T
    age: int
    day: int


def birthdays_in_month(
    records: Iterable[T],
    now: date | datetime,
    *,
    birth_date: Callable[[T], Optional[date]] = lambda r: r.birth_date,
    month: Optional[int] = None,
) -> list[BirthdayEntry[T]]:
    """Records born in `month` (default: now's month), with age, by day of month.

    The sort is stable, so running it again on its own output changes nothing.
    """
    target = month or now.month
    out: list[BirthdayEntry[T]] = []
    for record in records:
        born = birth_date(record)
        if born is None or born.month != target:
            continue
        out.append(BirthdayEntry(record=record, age=age_in_years(born, now), day=born.day))
    out.sort(key=lambda e: e.day)
    return out


def previous_month(now: date | datetime) -> int:
    return 12 if now.month == 1 else now.month - 1
