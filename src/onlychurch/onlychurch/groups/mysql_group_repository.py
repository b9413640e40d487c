from __future__ import annotations

import uuid
from typing import Mapping, Optional, Sequence

from ..core.enums import GroupStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import SmallGroup
from .repository import SmallGroupRepository

_SELECT = """
    SELECT g.id, g.nome, g.status, g.lider_id, g.dia_reuniao, g.horario, g.endereco,
           m.nome_completo AS lider_nome
    FROM pequenos_grupos g
    LEFT JOIN membros m ON m.id = g.lider_id AND m.user_id = g.user_id
    WHERE g.user_id=%s
"""


def _to_group(r: dict) -> SmallGroup:
    try:
        status = GroupStatus(r.get("status") or GroupStatus.ACTIVE.value)
    except ValueError:
        status = GroupStatus.INACTIVE
    horario = r.get("horario")
    return SmallGroup(
        group_id=str(r["id"]),
        name=r["nome"],
        status=status,
        leader_id=r.get("lider_id"),
        leader_name=r.get("lider_nome"),
        meeting_day=r.get("dia_reuniao"),
        # TIME columns come back as timedelta from the driver.
        meeting_time=str(horario)[:5] if horario is not None else None,
        address=r.get("endereco"),
    )


class MySQLSmallGroupRepository(SmallGroupRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, tenant_id: str) -> Sequence[SmallGroup]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY g.nome", (tenant_id,))
            return [_to_group(r) for r in fetchall(cur)]

    def get_by_id(self, tenant_id: str, group_id: str) -> Optional[SmallGroup]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " AND g.id=%s", (tenant_id, group_id))
            row = fetchone(cur)
            return _to_group(row) if row else None

    def member_counts(self, tenant_id: str) -> Mapping[str, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT mpg.grupo_id, COUNT(*) AS total
                FROM membros_pequenos_grupos mpg
                JOIN pequenos_grupos g ON g.id = mpg.grupo_id
                WHERE g.user_id=%s
                GROUP BY mpg.grupo_id
                """,
                (tenant_id,),
            )
            return {str(r["grupo_id"]): int(r["total"]) for r in fetchall(cur)}

    def create(self, tenant_id: str, group: SmallGroup) -> str:
        group_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO pequenos_grupos(id, user_id, nome, status, lider_id, dia_reuniao, horario, endereco)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    group_id,
                    tenant_id,
                    group.name,
                    group.status.value,
                    group.leader_id,
                    group.meeting_day,
                    group.meeting_time,
                    group.address,
                ),
            )
        return group_id

    def delete(self, tenant_id: str, group_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                DELETE mpg FROM membros_pequenos_grupos mpg
                JOIN pequenos_grupos g ON g.id = mpg.grupo_id
                WHERE g.id=%s AND g.user_id=%s
                """,
                (group_id, tenant_id),
            )
            cur.execute("DELETE FROM pequenos_grupos WHERE id=%s AND user_id=%s", (group_id, tenant_id))
            return cur.rowcount > 0

    def add_member(self, tenant_id: str, group_id: str, member_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            # Both sides must belong to the tenant; re-adding is a no-op.
            cur.execute(
                """
                INSERT IGNORE INTO membros_pequenos_grupos(grupo_id, membro_id)
                SELECT g.id, m.id FROM pequenos_grupos g
                JOIN membros m ON m.user_id = g.user_id
                WHERE g.id=%s AND m.id=%s AND g.user_id=%s
                """,
                (group_id, member_id, tenant_id),
            )
            return cur.rowcount > 0

    def remove_member(self, tenant_id: str, group_id: str, member_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                DELETE mpg FROM membros_pequenos_grupos mpg
                JOIN pequenos_grupos g ON g.id = mpg.grupo_id
                WHERE mpg.grupo_id=%s AND mpg.membro_id=%s AND g.user_id=%s
                """,
                (group_id, member_id, tenant_id),
            )
            return cur.rowcount > 0
