import pytest

from fakes import OTHER_TENANT, TENANT, InMemoryDepartments, child_row, member_row
from onlychurch.core.exceptions import NotFoundError, ValidationError
from onlychurch.departments.service import DepartmentService


@pytest.fixture
def repo():
    return InMemoryDepartments()


@pytest.fixture
def service(repo, fetcher):
    return DepartmentService(repo, fetcher)


def test_list_with_member_counts(service, store):
    service.create_department(TENANT, {"name": "Louvor"})
    service.create_department(TENANT, {"name": "Infantil"})
    member_row(store, "a", department="Louvor")
    member_row(store, "b", department="Louvor")
    member_row(store, "c")
    member_row(store, "x", department="Louvor", tenant=OTHER_TENANT)

    views = service.list_departments(TENANT)
    assert [(v.department.name, v.member_count) for v in views] == [("Infantil", 0), ("Louvor", 2)]
    assert views[1].as_dict()["member_count"] == 2


def test_search_by_name(service):
    service.create_department(TENANT, {"name": "Louvor"})
    service.create_department(TENANT, {"name": "Jovens"})
    assert [v.department.name for v in service.list_departments(TENANT, search="lou")] == ["Louvor"]


def test_stats_count_active_children(service, store):
    service.create_department(TENANT, {"name": "Louvor"})
    member_row(store, "a", department="Louvor")
    member_row(store, "b", department="Sem cadastro")
    child_row(store, "kid 1")
    child_row(store, "kid 2", active=0)

    assert service.department_stats(TENANT) == {
        "departments": 1,
        "members_in_departments": 1,
        "active_children": 1,
    }


def test_name_is_required_and_unique(service):
    with pytest.raises(ValidationError):
        service.create_department(TENANT, {"name": ""})

    service.create_department(TENANT, {"name": "Louvor"})
    with pytest.raises(ValidationError):
        service.create_department(TENANT, {"name": "louvor"})

    # another church may reuse the name
    service.create_department(OTHER_TENANT, {"name": "Louvor"})


def test_leaders_must_differ(service):
    with pytest.raises(ValidationError):
        service.create_department(TENANT, {"name": "Louvor", "leader_id": "m1", "second_leader_id": "m1"})


def test_update_keeps_own_name_and_rejects_taken_one(service, repo):
    louvor = service.create_department(TENANT, {"name": "Louvor"})
    service.create_department(TENANT, {"name": "Jovens"})

    service.update_department(TENANT, louvor, {"name": "Louvor", "leader_id": "m1"})
    assert repo.get_by_id(TENANT, louvor).leader_id == "m1"

    with pytest.raises(ValidationError):
        service.update_department(TENANT, louvor, {"name": "Jovens"})


def test_update_and_delete_unknown(service):
    with pytest.raises(NotFoundError):
        service.update_department(TENANT, "nope", {"name": "X"})
    with pytest.raises(NotFoundError):
        service.delete_department(TENANT, "nope")


def test_member_counts_ignore_padding_in_stored_names(service, repo, store):
    from onlychurch.departments.model import Department

    repo.items["legacy"] = (TENANT, Department("legacy", "Louvor ", None, None))
    member_row(store, "a", department="Louvor")
    member_row(store, "b", department=" Louvor")

    [view] = service.list_departments(TENANT)
    assert view.member_count == 2
    assert service.department_stats(TENANT)["members_in_departments"] == 2
