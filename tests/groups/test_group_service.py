import pytest

from fakes import TENANT, InMemoryGroups
from onlychurch.core.exceptions import NotFoundError, ValidationError
from onlychurch.groups.service import SmallGroupService


@pytest.fixture
def repo():
    r = InMemoryGroups()
    r.known_members.update({"m1", "m2", "m3"})
    return r


@pytest.fixture
def service(repo):
    return SmallGroupService(repo)


def test_create_and_list_with_member_counts(service):
    alpha = service.create_group(TENANT, {"name": "Alfa", "meeting_day": "Quarta", "meeting_time": "19:30"})
    service.create_group(TENANT, {"name": "Beta", "status": "inativo"})
    service.add_member(TENANT, alpha, "m1")
    service.add_member(TENANT, alpha, "m2")

    views = service.list_groups(TENANT)
    assert [(v.group.name, v.member_count) for v in views] == [("Alfa", 2), ("Beta", 0)]
    assert views[0].as_dict()["status"] == "ativo"
    assert service.group_stats(TENANT) == {"total": 2, "active": 1, "members": 2}


def test_invalid_status(service):
    with pytest.raises(ValidationError):
        service.create_group(TENANT, {"name": "Alfa", "status": "pausado"})


def test_add_member_twice_or_unknown(service):
    alpha = service.create_group(TENANT, {"name": "Alfa"})
    service.add_member(TENANT, alpha, "m1")
    with pytest.raises(ValidationError):
        service.add_member(TENANT, alpha, "m1")
    with pytest.raises(ValidationError):
        service.add_member(TENANT, alpha, "ghost")


def test_add_member_to_missing_group(service):
    with pytest.raises(NotFoundError):
        service.add_member(TENANT, "nope", "m1")


def test_remove_member_and_delete(service, repo):
    alpha = service.create_group(TENANT, {"name": "Alfa"})
    service.add_member(TENANT, alpha, "m1")
    service.remove_member(TENANT, alpha, "m1")
    with pytest.raises(NotFoundError):
        service.remove_member(TENANT, alpha, "m1")

    service.delete_group(TENANT, alpha)
    with pytest.raises(NotFoundError):
        service.delete_group(TENANT, alpha)
