from datetime import datetime

from onlychurch.records.model import StoreQuery
from onlychurch.records.mysql_record_store import build_where, escape_like


def test_where_starts_with_the_tenant():
    where, params = build_where(StoreQuery(table="membros", tenant_column="user_id", tenant_id="t1"))
    assert where == "user_id=%s"
    assert params == ["t1"]


def test_where_with_every_filter():
    start, end = datetime(2024, 3, 1), datetime(2024, 3, 31, 23, 59)
    where, params = build_where(
        StoreQuery(
            table="membros",
            tenant_column="user_id",
            tenant_id="t1",
            text_column="nome_completo",
            text="50%_Ana",
            equals={"departamento": "Louvor", "foto_url": None},
            range_column="data_membro",
            range_start=start,
            range_end=end,
            range_end_inclusive=True,
        )
    )
    assert where == (
        "user_id=%s AND LOWER(nome_completo) LIKE %s AND departamento=%s AND foto_url IS NULL"
        " AND data_membro>=%s AND data_membro<=%s"
    )
    assert params == ["t1", "%50\\%\\_ana%", "Louvor", start, end]


def test_half_open_range_uses_strict_upper_bound():
    where, _ = build_where(
        StoreQuery(
            table="cadastro_visitantes",
            tenant_column="user_id",
            tenant_id="t1",
            range_column="data_visita",
            range_start=datetime(2024, 2, 14),
            range_end=datetime(2024, 3, 15),
        )
    )
    assert where.endswith("data_visita<%s")


def test_escape_like():
    assert escape_like("a\\b%c_d") == "a\\\\b\\%c\\_d"
