from __future__ import annotations

from typing import Any, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import StoreQuery
from .repository import RecordStore


def escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_where(query: StoreQuery) -> tuple[str, list[Any]]:
    """WHERE clause for a resolved query. Identifiers come from RecordSchema only."""
    clauses = [f"{query.tenant_column}=%s"]
    params: list[Any] = [query.tenant_id]

    if query.text_column and query.text:
        clauses.append(f"LOWER({query.text_column}) LIKE %s")
        params.append(f"%{escape_like(query.text.strip().lower())}%")

    for column, value in query.equals.items():
        if value is None:
            clauses.append(f"{column} IS NULL")
        else:
            clauses.append(f"{column}=%s")
            params.append(value)

    if query.range_column:
        if query.range_start is not None:
            clauses.append(f"{query.range_column}>=%s")
            params.append(query.range_start)
        if query.range_end is not None:
            op = "<=" if query.range_end_inclusive else "<"
            clauses.append(f"{query.range_column}{op}%s")
            params.append(query.range_end)

    return " AND ".join(clauses), params


class MySQLRecordStore(RecordStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def query(self, query: StoreQuery) -> Sequence[dict]:
        where, params = build_where(query)
        sql = f"SELECT * FROM {query.table} WHERE {where}"
        if query.order_column:
            sql += f" ORDER BY {query.order_column} {'DESC' if query.descending else 'ASC'}"
        if query.limit is not None:
            sql += " LIMIT %s OFFSET %s"
            params += [int(query.limit), int(query.offset)]

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return fetchall(cur)

    def count(self, query: StoreQuery) -> int:
        where, params = build_where(query)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM {query.table} WHERE {where}", tuple(params))
            row = fetchone(cur)
            return int(row["total"]) if row else 0
