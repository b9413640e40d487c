from __future__ import annotations

import uuid
from dataclasses import asdict
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, placeholders
from ..stats.windows import TimeWindow
from .model import AttendanceMark, Child, ChildClass, ChildDraft
from .repository import ChildrenRepository


class MySQLChildrenRepository(ChildrenRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_child(self, tenant_id: str, draft: ChildDraft) -> str:
        child_id = str(uuid.uuid4())
        values = {Child.COLUMNS[attr]: value for attr, value in asdict(draft).items()}
        columns = ["id", "user_id", *values.keys()]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO criancas({', '.join(columns)}) VALUES({placeholders(len(columns))})",
                (child_id, tenant_id, *values.values()),
            )
        return child_id

    def list_classes(self, tenant_id: str, *, active_only: bool = True) -> Sequence[ChildClass]:
        sql = "SELECT id, nome, idade_min, idade_max, ativo FROM turmas WHERE user_id=%s"
        if active_only:
            sql += " AND ativo=1"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql + " ORDER BY nome", (tenant_id,))
            return [
                ChildClass(
                    class_id=str(r["id"]),
                    name=r["nome"],
                    min_age=r.get("idade_min"),
                    max_age=r.get("idade_max"),
                    active=bool(r.get("ativo", 1)),
                )
                for r in fetchall(cur)
            ]

    def create_class(self, tenant_id: str, child_class: ChildClass) -> str:
        class_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO turmas(id, user_id, nome, idade_min, idade_max, ativo) VALUES(%s,%s,%s,%s,%s,%s)",
                (class_id, tenant_id, child_class.name, child_class.min_age, child_class.max_age, child_class.active),
            )
        return class_id

    def record_attendance(self, tenant_id: str, marks: Sequence[AttendanceMark]) -> int:
        if not marks:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            for m in marks:
                # Rows only come out of the SELECT when the child (and class, if given) belong to the tenant.
                cur.execute(
                    """
                    INSERT INTO presenca_criancas(id, user_id, crianca_id, turma_id, data_aula, presente)
                    SELECT %s, c.user_id, c.id, %s, %s, %s
                    FROM criancas c
                    WHERE c.id=%s AND c.user_id=%s
                      AND (%s IS NULL OR EXISTS (SELECT 1 FROM turmas t WHERE t.id=%s AND t.user_id=%s))
                    ON DUPLICATE KEY UPDATE presente=%s, turma_id=%s
                    """,
                    (
                        str(uuid.uuid4()), m.class_id, m.class_date, m.present,
                        m.child_id, tenant_id,
                        m.class_id, m.class_id, tenant_id,
                        m.present, m.class_id,
                    ),
                )
        return len(marks)

    def attendance_totals(self, tenant_id: str, window: TimeWindow) -> tuple[int, int]:
        op = "<=" if window.end_inclusive else "<"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT COALESCE(SUM(presente), 0) AS present, COUNT(*) AS total
                FROM presenca_criancas
                WHERE user_id=%s AND data_aula>=%s AND data_aula{op}%s
                """,
                (tenant_id, window.start.date(), window.end.date()),
            )
            row = fetchone(cur) or {}
            return int(row.get("present") or 0), int(row.get("total") or 0)
