from datetime import date

import pytest

from fakes import OTHER_TENANT, TENANT, InMemoryChildren, child_row
from onlychurch.children.service import ChildrenService
from onlychurch.core.exceptions import ValidationError


@pytest.fixture
def repo(store):
    return InMemoryChildren(store)


@pytest.fixture
def service(repo, fetcher, fixed_now):
    return ChildrenService(repo, fetcher, clock=lambda: fixed_now)


def test_children_listed_by_name_with_search(service, store):
    child_row(store, "Lucas")
    child_row(store, "Ana")
    child_row(store, "Luiza")

    assert [c.full_name for c in service.list_children(TENANT)] == ["Ana", "Lucas", "Luiza"]
    assert [c.full_name for c in service.list_children(TENANT, search="lu")] == ["Lucas", "Luiza"]


def test_register_child(service):
    child_id = service.register_child(
        TENANT, {"full_name": "Ana", "guardian_phone": "(11) 91234-5678", "birth_date": "2019-05-01"}
    )
    [child] = service.list_children(TENANT)
    assert child.id == child_id
    assert child.guardian_phone == "11912345678"
    assert child.active is True


def test_register_class_checks_age_range(service):
    with pytest.raises(ValidationError):
        service.register_class(TENANT, {"name": "Maternal", "min_age": "5", "max_age": "3"})
    with pytest.raises(ValidationError):
        service.register_class(TENANT, {"name": "Maternal", "min_age": "dois"})

    service.register_class(TENANT, {"name": "Maternal", "min_age": "2", "max_age": "4"})
    [cls] = service.list_classes(TENANT)
    assert (cls.name, cls.min_age, cls.max_age) == ("Maternal", 2, 4)


def test_record_attendance(service, repo, store):
    ana = child_row(store, "Ana")["id"]
    bia = child_row(store, "Bia")["id"]
    saved = service.record_attendance(
        TENANT,
        class_date="2024-03-10",
        entries=[{"child_id": ana, "present": True}, {"child_id": bia, "present": False}],
    )
    assert saved == 2
    assert [m.class_date for _, m in repo.marks] == [date(2024, 3, 10)] * 2


def test_record_attendance_needs_date_and_entries(service, store):
    ana = child_row(store, "Ana")["id"]
    with pytest.raises(ValidationError):
        service.record_attendance(TENANT, class_date="", entries=[{"child_id": ana}])
    with pytest.raises(ValidationError):
        service.record_attendance(TENANT, class_date="2024-03-10", entries=[])


def test_attendance_for_another_churchs_child_is_rejected(service, repo, store):
    ours = child_row(store, "Ana")["id"]
    theirs = child_row(store, "Outra", tenant=OTHER_TENANT)["id"]

    with pytest.raises(ValidationError, match="Criança não encontrada"):
        service.record_attendance(
            TENANT,
            class_date="2024-03-10",
            entries=[{"child_id": ours, "present": True}, {"child_id": theirs, "present": False}],
        )
    with pytest.raises(ValidationError, match="Criança não encontrada"):
        service.record_attendance(TENANT, class_date="2024-03-10", entries=[{"child_id": "nao-existe"}])
    assert repo.marks == []


def test_attendance_with_another_churchs_class_is_rejected(service, repo, store):
    ana = child_row(store, "Ana")["id"]
    other_class = service.register_class(OTHER_TENANT, {"name": "Maternal"})

    with pytest.raises(ValidationError, match="Turma não encontrada"):
        service.record_attendance(
            TENANT, class_date="2024-03-10", entries=[{"child_id": ana, "class_id": other_class, "present": True}]
        )
    assert repo.marks == []

    own_class = service.register_class(TENANT, {"name": "Jardim"})
    service.record_attendance(
        TENANT, class_date="2024-03-10", entries=[{"child_id": ana, "class_id": own_class, "present": True}]
    )
    assert [m.class_id for _, m in repo.marks] == [own_class]


def test_stats_with_monthly_attendance_rate(service, store):
    ana = child_row(store, "Ana")["id"]
    bia = child_row(store, "Bia", active=0)["id"]
    service.register_class(TENANT, {"name": "Maternal"})
    service.record_attendance(
        TENANT,
        class_date="2024-03-03",
        entries=[{"child_id": ana, "present": True}, {"child_id": bia, "present": True}],
    )
    service.record_attendance(TENANT, class_date="2024-03-10", entries=[{"child_id": ana}])
    service.record_attendance(TENANT, class_date="2024-02-25", entries=[{"child_id": ana}])

    assert service.children_stats(TENANT) == {"total": 2, "active": 1, "classes": 1, "attendance_rate": 67}


def test_attendance_rate_stops_at_today(service, store, fixed_now):
    ana = child_row(store, "Ana")["id"]
    service.record_attendance(TENANT, class_date="2024-03-10", entries=[{"child_id": ana, "present": True}])
    # Pre-filled roll call for a class later this month.
    service.record_attendance(TENANT, class_date="2024-03-24", entries=[{"child_id": ana, "present": False}])

    assert service.children_stats(TENANT)["attendance_rate"] == 100


def test_attendance_rate_without_rows_is_zero(service):
    assert service.children_stats(TENANT)["attendance_rate"] == 0
