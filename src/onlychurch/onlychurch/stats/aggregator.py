from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from ..core.constants import AGE_BANDS, UNSPECIFIED_LABEL

T = TypeVar("T")


@dataclass
class AggregationResult:
    """Counts per category label plus the grand total.

    Label order is not part of the contract; see stats.presentation for display order.
    """

    counts: dict[str, int] = field(default_factory=dict)
    total: int = 0

    def get(self, label: str) -> int:
        return self.counts.get(label, 0)

    def add(self, label: str) -> None:
        self.counts[label] = self.counts.get(label, 0) + 1
        self.total += 1


def _label(value) -> str:
    if value is None:
        return UNSPECIFIED_LABEL
    text = str(value).strip()
    return text or UNSPECIFIED_LABEL


def aggregate(
    records: Iterable[T],
    key: Callable[[T], Optional[object]],
    *,
    labels: Sequence[str] = (),
) -> AggregationResult:
    """Count records per `key(record)`; blank keys go to the "Não informado" bucket.

    `labels` are seeded with zero so fixed charts keep every bar.
    """
    result = AggregationResult(counts={label: 0 for label in labels})
    for record in records:
        result.add(_label(key(record)))
    return result


def count_where(records: Iterable[T], predicate: Callable[[T], bool]) -> int:
    return sum(1 for r in records if predicate(r))


def age_in_years(birth_date: date | datetime, now: date | datetime) -> int:
    """Whole-year difference (`now.year - birth.year`), not age to the day."""
    return now.year - birth_date.year


def age_band(age: int) -> str:
    if age <= 25:
        return AGE_BANDS[0]
    if age <= 35:
        return AGE_BANDS[1]
    if age <= 45:
        return AGE_BANDS[2]
    if age <= 55:
        return AGE_BANDS[3]
    return AGE_BANDS[4]


def age_distribution(
    records: Iterable[T],
    now: date | datetime,
    birth_date: Callable[[T], Optional[date]] = lambda r: r.birth_date,
) -> AggregationResult:
    def band(record: T) -> Optional[str]:
        born = birth_date(record)
        if born is None:
            return None
        return age_band(age_in_years(born, now))

    return aggregate(records, band, labels=AGE_BANDS)
