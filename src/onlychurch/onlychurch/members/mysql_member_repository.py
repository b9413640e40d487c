from __future__ import annotations

import uuid
from dataclasses import asdict
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, placeholders
from .model import Member, MemberDraft
from .repository import MemberRepository


def _draft_columns(draft: MemberDraft) -> dict:
    return {Member.COLUMNS[attr]: value for attr, value in asdict(draft).items()}


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, tenant_id: str, member_id: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT * FROM membros WHERE id=%s AND user_id=%s", (member_id, tenant_id))
            row = fetchone(cur)
            return Member.from_row(row) if row else None

    def create(self, tenant_id: str, draft: MemberDraft) -> str:
        member_id = str(uuid.uuid4())
        values = _draft_columns(draft)
        columns = ["id", "user_id", *values.keys()]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO membros({', '.join(columns)}) VALUES({placeholders(len(columns))})",
                (member_id, tenant_id, *values.values()),
            )
        return member_id

    def update(self, tenant_id: str, member_id: str, draft: MemberDraft) -> bool:
        values = _draft_columns(draft)
        assignments = ", ".join(f"{col}=%s" for col in values)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE membros SET {assignments} WHERE id=%s AND user_id=%s",
                (*values.values(), member_id, tenant_id),
            )
            return cur.rowcount > 0

    def delete(self, tenant_id: str, member_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM membros WHERE id=%s AND user_id=%s", (member_id, tenant_id))
            return cur.rowcount > 0
