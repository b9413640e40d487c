from datetime import date, datetime, timedelta

import pytest

from fakes import OTHER_TENANT, TENANT, InMemoryDepartments, member_row, visitor_row
from onlychurch.core.enums import ActivityType
from onlychurch.dashboard.service import DashboardService


@pytest.fixture
def departments():
    repo = InMemoryDepartments()
    repo.create(TENANT, name="Louvor", leader_id=None, second_leader_id=None)
    return repo


@pytest.fixture
def service(fetcher, departments, fixed_now):
    return DashboardService(fetcher, departments, clock=lambda: fixed_now)


def test_summary_counts_and_changes(service, store, fixed_now):
    for days in (1, 2, 3, 4, 5, 6):
        member_row(store, f"new-{days}", created_at=fixed_now - timedelta(days=days))
    for days in (31, 32, 33, 34, 35):
        member_row(store, f"old-{days}", created_at=fixed_now - timedelta(days=days))
    visitor_row(store, "v-prev", visit_date=fixed_now - timedelta(days=40))
    member_row(store, "elsewhere", tenant=OTHER_TENANT, created_at=fixed_now - timedelta(days=1))

    summary = service.summary(TENANT)

    assert (summary.members, summary.members_change) == (6, 20)
    assert (summary.visitors, summary.visitors_change) == (0, -100)
    assert summary.departments == 1

    cards = {c["key"]: c for c in summary.as_dict()["cards"]}
    assert cards["members"]["change"] == "+20%"
    assert cards["visitors"]["change"] == "-100%"


def test_empty_church_shows_zero_change(service):
    summary = service.summary(TENANT)
    assert (summary.members, summary.members_change, summary.visitors_change) == (0, 0, 0)
    assert summary.recent == []
    assert summary.birthdays == []


def test_birthdays_on_the_dashboard(service, store):
    member_row(store, "b", birth_date=date(1985, 3, 20))
    member_row(store, "a", birth_date=date(1990, 3, 5))
    member_row(store, "c", birth_date=date(1992, 4, 1))

    data = service.summary(TENANT).as_dict()
    assert [(b["name"], b["day"], b["age"]) for b in data["birthdays"]] == [("a", 5, 34), ("b", 20, 39)]


def test_recent_activity_merges_newest_five(service, store):
    base = datetime(2024, 3, 1, 9, 0)
    for i in range(5):
        member_row(store, f"m{i}", created_at=base + timedelta(hours=2 * i))
        visitor_row(store, f"v{i}", visit_date=base + timedelta(hours=2 * i + 1))

    recent = service.recent_activity(TENANT)

    assert [a.name for a in recent] == ["v4", "m4", "v3", "m3", "v2"]
    assert recent[0].type == ActivityType.VISITOR
    assert recent[1].as_dict()["type"] == "member"
