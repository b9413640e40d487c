from __future__ import annotations

import uuid
from dataclasses import asdict

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, placeholders
from .model import Visitor, VisitorDraft
from .repository import VisitorRepository


class MySQLVisitorRepository(VisitorRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, tenant_id: str, draft: VisitorDraft) -> str:
        visitor_id = str(uuid.uuid4())
        values = {Visitor.COLUMNS[attr]: value for attr, value in asdict(draft).items()}
        columns = ["id", "user_id", *values.keys()]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO cadastro_visitantes({', '.join(columns)}) VALUES({placeholders(len(columns))})",
                (visitor_id, tenant_id, *values.values()),
            )
        return visitor_id

    def delete(self, tenant_id: str, visitor_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM cadastro_visitantes WHERE id=%s AND user_id=%s", (visitor_id, tenant_id))
            return cur.rowcount > 0
