from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Mapping, Optional

from ..common.datetime_utils import now_local
from ..common.validators import (
    mask_phone,
    optional_date,
    optional_datetime,
    optional_email,
    optional_text,
    parse_flag,
    require_non_empty,
)
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import RecordKind, SortDirection
from ..core.exceptions import NotFoundError, ValidationError
from ..records.fetcher import RecordFetcher
from ..records.model import Page, RecordQuery
from ..stats.aggregator import AggregationResult, age_distribution, aggregate
from ..stats.change_rate import change_rate
from ..stats.presentation import StatCard, chart_series, format_change
from ..stats.windows import PeriodSettings
from .model import Visitor, VisitorDraft
from .repository import VisitorRepository


@dataclass(frozen=True)
class VisitorStats:
    total: int
    current_period: int
    previous_period: int
    change: int
    charts: dict[str, AggregationResult] = field(default_factory=dict)

    def cards(self) -> list[StatCard]:
        return [
            StatCard("total", "Total de Visitantes", self.total, format_change(self.change), "users", "blue"),
            StatCard("period", "Visitantes no Período", self.current_period, format_change(self.change), "user-plus", "green"),
        ]

    def as_dict(self) -> dict:
        return {
            "total": self.total,
            "current_period": self.current_period,
            "previous_period": self.previous_period,
            "change": self.change,
            "cards": [c.as_dict() for c in self.cards()],
            "charts": {name: chart_series(result) for name, result in self.charts.items()},
        }


class VisitorService:
    def __init__(
        self,
        visitors: VisitorRepository,
        fetcher: RecordFetcher,
        *,
        period: Optional[PeriodSettings] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._visitors = visitors
        self._fetcher = fetcher
        self._period = period or PeriodSettings()
        self._clock = clock

    def list_visitors(self, tenant_id: str, *, search: Optional[str] = None, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page:
        page = max(1, int(page))
        items = self._fetcher.fetch(
            RecordQuery(
                kind=RecordKind.VISITORS,
                tenant_id=tenant_id,
                search=search,
                order_by="visit_date",
                direction=SortDirection.DESC,
                limit=page_size,
                offset=(page - 1) * page_size,
            )
        )
        total = self._fetcher.count(RecordQuery(kind=RecordKind.VISITORS, tenant_id=tenant_id, search=search))
        return Page(items=items, total=total, page=page, page_size=page_size)

    def all_visitors(self, tenant_id: str, *, search: Optional[str] = None) -> list[Visitor]:
        return self._fetcher.fetch(
            RecordQuery(
                kind=RecordKind.VISITORS,
                tenant_id=tenant_id,
                search=search,
                order_by="visit_date",
                direction=SortDirection.DESC,
            )
        )

    def register_visitor(self, tenant_id: str, form: Mapping) -> str:
        if not tenant_id:
            raise ValidationError("Igreja não identificada")
        draft = VisitorDraft(
            name=require_non_empty(form.get("name"), "Nome"),
            # A visit registered without a date happened today.
            visit_date=optional_datetime(form.get("visit_date"), "Data da visita") or self._clock(),
            email=optional_email(form.get("email")),
            phone=mask_phone(form.get("phone")),
            whatsapp=mask_phone(form.get("whatsapp")),
            address=optional_text(form.get("address")),
            birth_date=optional_date(form.get("birth_date"), "Data de nascimento"),
            marital_status=optional_text(form.get("marital_status")),
            source=optional_text(form.get("source")),
            wants_devotional=parse_flag(form.get("wants_devotional")),
            wants_agenda=parse_flag(form.get("wants_agenda")),
        )
        return self._visitors.create(tenant_id, draft)

    def delete_visitor(self, tenant_id: str, visitor_id: str) -> None:
        if not self._visitors.delete(tenant_id, visitor_id):
            raise NotFoundError("Visitante não encontrado")

    def visitor_stats(self, tenant_id: str) -> VisitorStats:
        now = self._clock()
        windows = self._period.windows(now)
        visitors = self._fetcher.fetch(RecordQuery(kind=RecordKind.VISITORS, tenant_id=tenant_id))

        current = self._count_visits(tenant_id, windows.current)
        previous = self._count_visits(tenant_id, windows.previous)

        return VisitorStats(
            total=len(visitors),
            current_period=current,
            previous_period=previous,
            change=change_rate(current, previous),
            charts={
                "source": aggregate(visitors, lambda v: v.source),
                "age": age_distribution(visitors, now),
                "marital_status": aggregate(visitors, lambda v: v.marital_status),
            },
        )

    def _count_visits(self, tenant_id: str, window) -> int:
        return self._fetcher.count(
            RecordQuery(kind=RecordKind.VISITORS, tenant_id=tenant_id, range_field="visit_date", range=window)
        )
