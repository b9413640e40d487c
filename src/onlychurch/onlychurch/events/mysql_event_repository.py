from __future__ import annotations

import uuid
from dataclasses import asdict
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, placeholders
from .model import CalendarEvent, EventDraft
from .repository import EventRepository

_DRAFT_COLUMNS = [CalendarEvent.COLUMNS[attr] for attr in EventDraft.__dataclass_fields__]
_INSERT = (
    f"INSERT INTO calendar_events(id, user_id, created_by, {', '.join(_DRAFT_COLUMNS)}) "
    f"VALUES({placeholders(len(_DRAFT_COLUMNS) + 3)})"
)


def _params(tenant_id: str, draft: EventDraft, created_by: Optional[str]) -> tuple:
    return (str(uuid.uuid4()), tenant_id, created_by or tenant_id, *asdict(draft).values())


class MySQLEventRepository(EventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, tenant_id: str, draft: EventDraft, *, created_by: Optional[str] = None) -> str:
        params = _params(tenant_id, draft, created_by)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_INSERT, params)
        return params[0]

    def create_many(self, tenant_id: str, drafts: Sequence[EventDraft], *, created_by: Optional[str] = None) -> int:
        if not drafts:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(_INSERT, [_params(tenant_id, d, created_by) for d in drafts])
        return len(drafts)

    def delete(self, tenant_id: str, event_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM calendar_events WHERE id=%s AND user_id=%s", (event_id, tenant_id))
            return cur.rowcount > 0
