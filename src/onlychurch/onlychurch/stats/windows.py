"""Period windows for "current vs previous" comparisons.

Rolling windows are half-open, ``[start, end)``, and always adjacent:
``current.start == previous.end``. Calendar-month windows close the
completed previous month on both ends and run the current month up to and
including ``now``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Callable, Generic, Iterable, TypeVar

from ..common.datetime_utils import as_datetime, shift_month
from ..core.enums import PeriodMode
from ..core.exceptions import MalformedRecordError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class TimeWindow:
    start: datetime
    end: datetime
    end_inclusive: bool = False

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"window end {self.end} is before start {self.start}")

    def contains(self, moment: date | datetime) -> bool:
        moment = as_datetime(moment)
        if moment < self.start:
            return False
        return moment <= self.end if self.end_inclusive else moment < self.end


@dataclass(frozen=True)
class WindowPair:
    current: TimeWindow
    previous: TimeWindow


def rolling_windows(now: datetime, days: int) -> WindowPair:
    if days <= 0:
        raise ValueError("window length must be positive")
    length = timedelta(days=days)
    boundary = now - length
    return WindowPair(
        current=TimeWindow(start=boundary, end=now),
        previous=TimeWindow(start=boundary - length, end=boundary),
    )


def calendar_month_windows(now: datetime) -> WindowPair:
    this_month = datetime.combine(now.date().replace(day=1), time.min)
    last_month = datetime.combine(shift_month(now.date(), -1), time.min)
    last_day = datetime.combine((this_month - timedelta(days=1)).date(), time.max)
    return WindowPair(
        current=TimeWindow(start=this_month, end=now, end_inclusive=True),
        previous=TimeWindow(start=last_month, end=last_day, end_inclusive=True),
    )


def month_to_date(now: datetime) -> TimeWindow:
    """First day of `now`'s month up to and including `now`."""
    return calendar_month_windows(now).current


def period_windows(now: datetime, mode: PeriodMode, *, days: int = 30) -> WindowPair:
    if PeriodMode(mode) == PeriodMode.CALENDAR_MONTH:
        return calendar_month_windows(now)
    return rolling_windows(now, days)


def month_window(year: int, month: int) -> TimeWindow:
    """The whole calendar month, both ends inclusive."""
    start = date(year, month, 1)
    last_day = shift_month(start, 1) - timedelta(days=1)
    return TimeWindow(
        start=datetime.combine(start, time.min),
        end=datetime.combine(last_day, time.max),
        end_inclusive=True,
    )


@dataclass
class Partition(Generic[T]):
    current: list[T] = field(default_factory=list)
    previous: list[T] = field(default_factory=list)
    malformed: list[T] = field(default_factory=list)


def timestamp_of(attr: str) -> Callable[[object], datetime]:
    """Reader for ``record.<attr>`` that raises MalformedRecordError on a missing or non-date value."""

    def read(record) -> datetime:
        value = getattr(record, attr, None)
        if value is None:
            raise MalformedRecordError(f"{type(record).__name__}.{attr} is missing")
        if not isinstance(value, date):
            raise MalformedRecordError(f"{type(record).__name__}.{attr}={value!r} is not a date")
        return as_datetime(value)

    return read


def partition(
    records: Iterable[T],
    windows: WindowPair,
    timestamp: Callable[[T], date | datetime],
) -> Partition[T]:
    """Bucket records into the current and previous windows.

    Records whose `timestamp` raises MalformedRecordError land in `malformed`
    and are left out of both windows; records outside both windows are ignored.
    """
    out: Partition[T] = Partition()
    for record in records:
        try:
            moment = timestamp(record)
        except MalformedRecordError as e:
            logger.debug("excluded from time windows: %s", e)
            out.malformed.append(record)
            continue

        if windows.current.contains(moment):
            out.current.append(record)
        elif windows.previous.contains(moment):
            out.previous.append(record)
    return out


@dataclass(frozen=True)
class PeriodSettings:
    """The single "growth this period" definition used by every growth metric."""

    mode: PeriodMode = PeriodMode.ROLLING
    days: int = 30

    def windows(self, now: datetime) -> WindowPair:
        return period_windows(now, self.mode, days=self.days)
