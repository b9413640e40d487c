from datetime import date

from onlychurch.children.model import AttendanceMark
from onlychurch.children.mysql_children_repository import MySQLChildrenRepository


class RecordingCursor:
    def __init__(self):
        self.statements = []

    def execute(self, sql, params=()):
        self.statements.append((" ".join(sql.split()), params))

    def close(self):
        pass


class RecordingConnection:
    def __init__(self):
        self.cur = RecordingCursor()
        self.committed = False

    def cursor(self, dictionary=True):
        return self.cur

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self):
        self.conn = RecordingConnection()

    def connect(self):
        return self.conn


def test_attendance_upsert_is_guarded_by_tenant():
    factory = FakeConnectionFactory()
    repo = MySQLChildrenRepository(factory)

    saved = repo.record_attendance(
        "church-a",
        [
            AttendanceMark(child_id="k1", class_id="t1", class_date=date(2024, 3, 10), present=True),
            AttendanceMark(child_id="k2", class_id=None, class_date=date(2024, 3, 10), present=False),
        ],
    )

    assert saved == 2
    assert factory.conn.committed
    [(sql, params), (_, second)] = factory.conn.cur.statements
    assert "FROM criancas c WHERE c.id=%s AND c.user_id=%s" in sql
    assert "EXISTS (SELECT 1 FROM turmas t WHERE t.id=%s AND t.user_id=%s)" in sql
    assert "VALUES(presente)" not in sql
    assert params[4:9] == ("k1", "church-a", "t1", "t1", "church-a")
    assert second[4:7] == ("k2", "church-a", None)
