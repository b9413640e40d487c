from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..records.mysql_record_store import escape_like
from .model import Department
from .repository import DepartmentRepository

_SELECT = """
    SELECT d.id, d.nome, d.responsavel_id, d.responsavel_2_id,
           m1.nome_completo AS responsavel_nome,
           m2.nome_completo AS responsavel_2_nome
    FROM departamentos d
    LEFT JOIN membros m1 ON m1.id = d.responsavel_id AND m1.user_id = d.user_id
    LEFT JOIN membros m2 ON m2.id = d.responsavel_2_id AND m2.user_id = d.user_id
    WHERE d.user_id=%s
"""


def _to_department(r: dict) -> Department:
    return Department(
        dept_id=str(r["id"]),
        name=r["nome"],
        leader_id=r.get("responsavel_id"),
        second_leader_id=r.get("responsavel_2_id"),
        leader_name=r.get("responsavel_nome"),
        second_leader_name=r.get("responsavel_2_nome"),
    )


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, tenant_id: str, *, search: Optional[str] = None) -> Sequence[Department]:
        sql = _SELECT
        params: list = [tenant_id]
        if search and search.strip():
            sql += " AND LOWER(d.nome) LIKE %s"
            params.append(f"%{escape_like(search.strip().lower())}%")
        sql += " ORDER BY d.nome"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_department(r) for r in fetchall(cur)]

    def get_by_id(self, tenant_id: str, dept_id: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " AND d.id=%s", (tenant_id, dept_id))
            row = fetchone(cur)
            return _to_department(row) if row else None

    def get_by_name(self, tenant_id: str, name: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " AND LOWER(d.nome)=LOWER(%s)", (tenant_id, name))
            row = fetchone(cur)
            return _to_department(row) if row else None

    def create(self, tenant_id: str, *, name: str, leader_id: Optional[str], second_leader_id: Optional[str]) -> str:
        dept_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO departamentos(id, user_id, nome, responsavel_id, responsavel_2_id) VALUES(%s,%s,%s,%s,%s)",
                (dept_id, tenant_id, name, leader_id, second_leader_id),
            )
        return dept_id

    def update(
        self, tenant_id: str, dept_id: str, *, name: str, leader_id: Optional[str], second_leader_id: Optional[str]
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE departamentos SET nome=%s, responsavel_id=%s, responsavel_2_id=%s WHERE id=%s AND user_id=%s",
                (name, leader_id, second_leader_id, dept_id, tenant_id),
            )
            return cur.rowcount > 0

    def delete(self, tenant_id: str, dept_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM departamentos WHERE id=%s AND user_id=%s", (dept_id, tenant_id))
            return cur.rowcount > 0
