from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EventDraft


class EventRepository(Protocol):
    def create(self, tenant_id: str, draft: EventDraft, *, created_by: Optional[str] = None) -> str:
        raise NotImplementedError

    def create_many(self, tenant_id: str, drafts: Sequence[EventDraft], *, created_by: Optional[str] = None) -> int:
        raise NotImplementedError

    def delete(self, tenant_id: str, event_id: str) -> bool:
        raise NotImplementedError
