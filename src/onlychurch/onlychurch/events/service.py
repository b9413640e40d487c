from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from ..common.validators import optional_datetime, optional_text, require_non_empty
from ..core.enums import RecordKind
from ..core.exceptions import NotFoundError, ValidationError
from ..records.fetcher import RecordFetcher
from ..records.model import RecordQuery
from ..stats.windows import month_window
from .model import CalendarEvent, EventDraft
from .repository import EventRepository

logger = logging.getLogger(__name__)


def parse_month(value: Optional[str]) -> Optional[tuple[int, int]]:
    """'YYYY-MM' -> (year, month); blank -> None."""
    text = (value or "").strip()
    if not text:
        return None
    try:
        year, month = (int(part) for part in text.split("-")[:2])
        if not 1 <= month <= 12:
            raise ValueError(month)
    except ValueError:
        raise ValidationError("Mês inválido (AAAA-MM)")
    return year, month


def event_draft_from_form(form: Mapping) -> EventDraft:
    title = require_non_empty(form.get("title"), "Título")
    start_at = optional_datetime(form.get("start_at"), "Início")
    if start_at is None:
        raise ValidationError("Início é obrigatório")
    end_at = optional_datetime(form.get("end_at"), "Fim")
    if end_at is not None and end_at < start_at:
        raise ValidationError("O fim do evento não pode ser antes do início")
    return EventDraft(
        title=title,
        start_at=start_at,
        end_at=end_at,
        description=optional_text(form.get("description")),
        location=optional_text(form.get("location")),
        category=optional_text(form.get("category")),
    )


class EventService:
    def __init__(self, events: EventRepository, fetcher: RecordFetcher):
        self._events = events
        self._fetcher = fetcher

    def list_events(
        self,
        tenant_id: str,
        *,
        search: Optional[str] = None,
        month: Optional[str] = None,
        category: Optional[str] = None,
    ) -> list[CalendarEvent]:
        """Events ordered by start; `category` "all" or blank means every type."""
        target = parse_month(month)
        category = optional_text(category)
        equals = {"category": category} if category and category.lower() != "all" else {}
        events = self._fetcher.fetch(
            RecordQuery(
                kind=RecordKind.EVENTS,
                tenant_id=tenant_id,
                equals=equals,
                range_field="start_at",
                range=month_window(*target) if target else None,
                order_by="start_at",
            )
        )
        term = (search or "").strip().lower()
        if not term:
            return events
        # Title or description; the store filter only covers a single column.
        return [
            e for e in events
            if term in e.title.lower() or term in (e.description or "").lower()
        ]

    def create_event(self, tenant_id: str, form: Mapping, *, created_by: Optional[str] = None) -> str:
        return self._events.create(tenant_id, event_draft_from_form(form), created_by=created_by)

    def delete_event(self, tenant_id: str, event_id: str) -> None:
        if not self._events.delete(tenant_id, event_id):
            raise NotFoundError("Evento não encontrado")

    def import_events(self, tenant_id: str, items: Iterable[Mapping], *, created_by: Optional[str] = None) -> int:
        """Bulk insert events pulled from an external calendar."""
        drafts = []
        for index, item in enumerate(items, start=1):
            try:
                drafts.append(event_draft_from_form(item))
            except ValidationError as e:
                raise ValidationError(f"Evento {index}: {e}") from e
        if not drafts:
            raise ValidationError("Nenhum evento para importar")
        count = self._events.create_many(tenant_id, drafts, created_by=created_by)
        logger.info("imported %d events for tenant %s", count, tenant_id)
        return count
