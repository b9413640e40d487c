from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from ..stats.windows import TimeWindow
from .repository import AdminRepository

_USER_FIELDS = {"created_at", "updated_at"}


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def is_admin(self, user_id: str) -> bool:
        if not user_id:
            return False
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS ok FROM admin_users WHERE user_id=%s", (user_id,))
            return fetchone(cur) is not None

    def count_users(self, *, field: str = "created_at", window: Optional[TimeWindow] = None) -> int:
        if field not in _USER_FIELDS:
            raise ValidationError(f"Campo inválido para user_profiles: {field}")
        return self._count("user_profiles", field, window)

    def count_churches(self, *, window: Optional[TimeWindow] = None) -> int:
        return self._count("dados_igreja", "created_at", window)

    def _count(self, table: str, column: str, window: Optional[TimeWindow]) -> int:
        sql = f"SELECT COUNT(*) AS total FROM {table}"
        params: tuple = ()
        if window is not None:
            op = "<=" if window.end_inclusive else "<"
            sql += f" WHERE {column}>=%s AND {column}{op}%s"
            params = (window.start, window.end)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            row = fetchone(cur)
            return int(row["total"]) if row else 0
