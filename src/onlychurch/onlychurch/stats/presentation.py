from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from .aggregator import AggregationResult


@dataclass(frozen=True)
class StatCard:
    key: str
    title: str
    value: int | str
    change: str
    icon: str
    color: str
    link: Optional[str] = None

    def as_dict(self) -> dict:
        return asdict(self)


def format_change(rate: int) -> str:
    return f"{'+' if rate >= 0 else ''}{rate}%"


def ordered_buckets(result: AggregationResult) -> list[tuple[str, int]]:
    return sorted(result.counts.items(), key=lambda kv: (-kv[1], kv[0]))


def chart_series(result: AggregationResult, *, ordered: bool = False) -> dict:
    items = ordered_buckets(result) if ordered else list(result.counts.items())
    return {
        "labels": [label for label, _ in items],
        "data": [count for _, count in items],
        "total": result.total,
    }
