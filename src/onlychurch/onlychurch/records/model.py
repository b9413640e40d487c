from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

from ..core.enums import RecordKind, SortDirection
from ..stats.windows import TimeWindow


@dataclass(frozen=True)
class RecordQuery:
    """What a page asks the fetcher for, in domain attribute names.

    `range` applies to `range_field`; `equals` are exact matches pushed into
    the store (categorical predicates, flags).
    """

    kind: RecordKind
    tenant_id: Optional[str]
    search: Optional[str] = None
    search_field: Optional[str] = None
    equals: Mapping[str, Any] = field(default_factory=dict)
    range_field: Optional[str] = None
    range: Optional[TimeWindow] = None
    order_by: Optional[str] = None
    direction: SortDirection = SortDirection.ASC
    limit: Optional[int] = None
    offset: int = 0


@dataclass(frozen=True)
class StoreQuery:
    """A RecordQuery resolved to table/column names; what a RecordStore executes."""

    table: str
    tenant_column: str
    tenant_id: str
    text_column: Optional[str] = None
    text: Optional[str] = None
    equals: Mapping[str, Any] = field(default_factory=dict)
    range_column: Optional[str] = None
    range_start: Optional[datetime] = None
    range_end: Optional[datetime] = None
    range_end_inclusive: bool = False
    order_column: Optional[str] = None
    descending: bool = False
    limit: Optional[int] = None
    offset: int = 0


@dataclass(frozen=True)
class Page:
    items: list
    total: int
    page: int
    page_size: int

    @property
    def pages(self) -> int:
        if self.total <= 0:
            return 1
        return -(-self.total // self.page_size)
