from datetime import datetime

import pytest

from onlychurch.admin.service import AdminService
from onlychurch.core.exceptions import AuthorizationError


class FakeAdminRepo:
    def __init__(self, admins, users, churches):
        self.admins = set(admins)
        self.users = users  # list of (created_at, updated_at)
        self.churches = churches  # list of created_at

    def is_admin(self, user_id):
        return user_id in self.admins

    def count_users(self, *, field="created_at", window=None):
        index = 0 if field == "created_at" else 1
        return sum(1 for u in self.users if window is None or window.contains(u[index]))

    def count_churches(self, *, window=None):
        return sum(1 for c in self.churches if window is None or window.contains(c))


@pytest.fixture
def repo():
    return FakeAdminRepo(
        admins={"root"},
        users=[
            (datetime(2024, 3, 2), datetime(2024, 3, 10)),
            (datetime(2024, 1, 5), datetime(2024, 3, 1)),
            (datetime(2023, 11, 1), datetime(2023, 12, 1)),
        ],
        churches=[datetime(2024, 3, 2), datetime(2024, 3, 9), datetime(2024, 2, 29, 22), datetime(2023, 5, 1)],
    )


def test_non_admin_is_refused(repo, fixed_now):
    service = AdminService(repo, clock=lambda: fixed_now)
    with pytest.raises(AuthorizationError):
        service.console_stats("church-a")


def test_console_stats(repo, fixed_now):
    stats = AdminService(repo, clock=lambda: fixed_now).console_stats("root")

    assert stats.total_users == 3
    assert stats.active_users == 2
    assert stats.new_users == 1
    assert stats.total_churches == 4
    assert stats.churches_growth == 100
    assert stats.as_dict()["cards"][3]["change"] == "+100%"
