from datetime import date, datetime, timedelta

import pytest

from fakes import (
    OTHER_TENANT,
    TENANT,
    InMemoryChildren,
    InMemoryDepartments,
    InMemoryEvents,
    InMemoryGroups,
    InMemoryMembers,
    InMemoryVisitors,
    child_row,
    member_row,
    visitor_row,
)
from onlychurch.admin.service import AdminService
from onlychurch.children.service import ChildrenService
from onlychurch.container import Container
from onlychurch.core.exceptions import RetrievalError
from onlychurch.dashboard.service import DashboardService
from onlychurch.departments.service import DepartmentService
from onlychurch.events.service import EventService
from onlychurch.groups.service import SmallGroupService
from onlychurch.main import create_app
from onlychurch.members.service import MemberService
from onlychurch.registration.service import RegistrationService
from onlychurch.stats.windows import PeriodSettings
from onlychurch.visitors.service import VisitorService


class NoAdmins:
    def is_admin(self, user_id):
        return False


@pytest.fixture
def container(store, fetcher, fixed_now):
    period = PeriodSettings()
    clock = lambda: fixed_now  # noqa: E731
    departments = InMemoryDepartments()
    return Container(
        conn=None,
        fetcher=fetcher,
        period=period,
        member_service=MemberService(InMemoryMembers(store), fetcher, period=period, clock=clock),
        visitor_service=VisitorService(InMemoryVisitors(store), fetcher, period=period, clock=clock),
        department_service=DepartmentService(departments, fetcher),
        group_service=SmallGroupService(InMemoryGroups()),
        children_service=ChildrenService(InMemoryChildren(store), fetcher, clock=clock),
        event_service=EventService(InMemoryEvents(store), fetcher),
        dashboard_service=DashboardService(fetcher, departments, period=period, clock=clock),
        admin_service=AdminService(NoAdmins(), clock=clock),
        registration_service=RegistrationService(""),
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in(client):
    with client.session_transaction() as s:
        s["user_id"] = TENANT
    return client


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_container_is_kept_on_the_app(app, container):
    assert app.extensions["onlychurch"] is container


@pytest.mark.parametrize("path", ["/api/dashboard", "/api/members", "/api/visitors/stats", "/api/admin/stats"])
def test_tenant_pages_require_a_session(client, path):
    resp = client.get(path)
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_member_crud_round(logged_in):
    resp = logged_in.post("/api/members", json={"full_name": "Ana Souza", "birth_date": "1990-03-05"})
    assert resp.status_code == 201
    member_id = resp.get_json()["id"]

    member = logged_in.get(f"/api/members/{member_id}").get_json()["member"]
    assert member["full_name"] == "Ana Souza"
    assert member["birth_date"] == "1990-03-05"
    assert "tenant_id" not in member

    assert logged_in.put(f"/api/members/{member_id}", json={"full_name": "Ana Lima"}).status_code == 200
    assert logged_in.delete(f"/api/members/{member_id}").status_code == 200
    assert logged_in.get(f"/api/members/{member_id}").status_code == 404


def test_validation_errors_are_400(logged_in):
    resp = logged_in.post("/api/members", json={"full_name": ""})
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Nome completo é obrigatório"}


def test_member_list_and_birthdays(logged_in, store):
    member_row(store, "Ana", birth_date=date(1990, 3, 5))
    member_row(store, "Bruno", birth_date=date(1985, 4, 20))

    data = logged_in.get("/api/members?search=an&page=1").get_json()
    assert [m["full_name"] for m in data["items"]] == ["Ana"]
    assert data["pages"] == 1

    birthdays = logged_in.get("/api/members/birthdays").get_json()["items"]
    assert [(b["full_name"], b["day"], b["age"]) for b in birthdays] == [("Ana", 5, 34)]


def test_bad_page_number(logged_in):
    assert logged_in.get("/api/members?page=abc").status_code == 400


def test_members_csv_export(logged_in, store):
    member_row(store, "Ana", department="Louvor")
    resp = logged_in.get("/api/members.csv")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attachment; filename=membros_" in resp.headers["Content-Disposition"]
    text = resp.data.decode("utf-8-sig")
    assert text.splitlines()[0].startswith("full_name,email,phone")
    assert "Ana" in text and "Louvor" in text


def test_dashboard_payload(logged_in, store, fixed_now):
    member_row(store, "Ana", created_at=fixed_now - timedelta(days=1))
    visitor_row(store, "Daniel", visit_date=fixed_now - timedelta(days=2))

    data = logged_in.get("/api/dashboard").get_json()
    cards = {c["key"]: c for c in data["cards"]}
    assert cards["members"]["value"] == 1
    assert cards["members"]["change"] == "+100%"
    assert [a["type"] for a in data["recent_activity"]] == ["member", "visitor"]


def test_admin_console_is_forbidden_for_tenants(logged_in):
    assert logged_in.get("/api/admin/stats").status_code == 403


def test_registration_without_webhook_is_502(client):
    resp = client.post(
        "/api/registration",
        json={"name": "Maria", "phone": "11988887777", "email": "m@x.com", "church": "Central", "pastor": "João"},
    )
    assert resp.status_code == 502


def test_store_outage_is_503(logged_in, store):
    store.fail_with = RetrievalError("Banco de dados indisponível")
    resp = logged_in.get("/api/visitors/stats")
    assert resp.status_code == 503
    assert resp.get_json()["message"] == "Banco de dados indisponível"


def test_unexpected_error_is_500(logged_in, store):
    store.fail_with = RuntimeError("boom")
    resp = logged_in.get("/api/members")
    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "Erro interno do servidor"}


def test_group_membership_endpoints(logged_in, container):
    container.group_service._groups.known_members.add("m1")
    group_id = logged_in.post("/api/groups", json={"name": "Alfa"}).get_json()["id"]

    assert logged_in.post(f"/api/groups/{group_id}/members", json={"member_id": "m1"}).status_code == 201
    groups = logged_in.get("/api/groups").get_json()
    assert groups["items"][0]["member_count"] == 1
    assert groups["stats"]["members"] == 1
    assert logged_in.delete(f"/api/groups/{group_id}/members/m1").status_code == 200


def test_events_import(logged_in):
    resp = logged_in.post(
        "/api/events/import",
        json={"events": [{"title": "Culto", "start_at": "2024-03-17T19:00"}]},
    )
    assert resp.get_json()["imported"] == 1

    events = logged_in.get("/api/events?month=2024-03").get_json()["items"]
    assert events[0]["created_by"] == TENANT
    assert events[0]["start_at"] == datetime(2024, 3, 17, 19).isoformat()
    assert logged_in.post("/api/events/import", json={"events": "nope"}).status_code == 400


def test_events_filtered_by_category(logged_in):
    logged_in.post("/api/events", json={"title": "Culto", "start_at": "2024-03-17T19:00", "category": "culto"})
    logged_in.post("/api/events", json={"title": "Ensaio", "start_at": "2024-03-18T20:00", "category": "ensaio"})

    items = logged_in.get("/api/events?category=ensaio").get_json()["items"]
    assert [e["title"] for e in items] == ["Ensaio"]
    assert len(logged_in.get("/api/events?category=all").get_json()["items"]) == 2


def test_attendance_for_a_foreign_child_is_400(logged_in, store):
    theirs = child_row(store, "Outra", tenant=OTHER_TENANT)["id"]
    resp = logged_in.post(
        "/api/children/attendance",
        json={"class_date": "2024-03-10", "entries": [{"child_id": theirs, "present": False}]},
    )
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
