from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from ..common.datetime_utils import now_local
from ..core.exceptions import AuthorizationError
from ..stats.change_rate import change_rate
from ..stats.presentation import StatCard, format_change
from ..stats.windows import calendar_month_windows
from .repository import AdminRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConsoleStats:
    total_users: int
    active_users: int
    new_users: int
    total_churches: int
    churches_growth: int

    def cards(self) -> list[StatCard]:
        return [
            StatCard("total_users", "Total de Usuários", self.total_users, "", "users", "blue"),
            StatCard("active_users", "Usuários Ativos", self.active_users, "", "user-check", "green"),
            StatCard("new_users", "Novos Usuários (Mês)", self.new_users, "", "user-plus", "purple"),
            StatCard("churches", "Total de Igrejas", self.total_churches, format_change(self.churches_growth), "church", "yellow"),
        ]

    def as_dict(self) -> dict:
        return {
            "total_users": self.total_users,
            "active_users": self.active_users,
            "new_users": self.new_users,
            "total_churches": self.total_churches,
            "churches_growth": self.churches_growth,
            "cards": [c.as_dict() for c in self.cards()],
        }


class AdminService:
    def __init__(self, admin: AdminRepository, *, clock: Callable[[], datetime] = now_local):
        self._admin = admin
        self._clock = clock

    def require_admin(self, user_id: str) -> None:
        if not self._admin.is_admin(user_id):
            logger.warning("admin console denied for user %s", user_id)
            raise AuthorizationError("Acesso restrito a administradores")

    def console_stats(self, user_id: str) -> ConsoleStats:
        self.require_admin(user_id)
        windows = calendar_month_windows(self._clock())

        this_month = self._admin.count_churches(window=windows.current)
        last_month = self._admin.count_churches(window=windows.previous)
        return ConsoleStats(
            total_users=self._admin.count_users(),
            active_users=self._admin.count_users(field="updated_at", window=windows.current),
            new_users=self._admin.count_users(window=windows.current),
            total_churches=self._admin.count_churches(),
            churches_growth=change_rate(this_month, last_month),
        )
