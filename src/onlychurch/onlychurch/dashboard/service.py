from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import as_datetime, now_local
from ..core.constants import DEFAULT_RECENT_LIMIT
from ..core.enums import ActivityType, RecordKind, SortDirection
from ..departments.repository import DepartmentRepository
from ..members.model import Member
from ..records.fetcher import RecordFetcher
from ..records.model import RecordQuery
from ..stats.birthdays import BirthdayEntry, birthdays_in_month
from ..stats.change_rate import change_rate
from ..stats.presentation import StatCard, format_change
from ..stats.windows import PeriodSettings, TimeWindow


@dataclass(frozen=True)
class RecentActivity:
    id: str
    type: ActivityType
    name: str
    date: Optional[datetime]

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "name": self.name,
            "date": self.date.isoformat() if self.date else None,
        }


@dataclass(frozen=True)
class DashboardSummary:
    members: int
    members_change: int
    visitors: int
    visitors_change: int
    departments: int
    birthdays: list[BirthdayEntry[Member]] = field(default_factory=list)
    recent: list[RecentActivity] = field(default_factory=list)

    def cards(self) -> list[StatCard]:
        return [
            StatCard("members", "Total de Membros no Mês", self.members, format_change(self.members_change), "users", "blue", "/members"),
            StatCard("visitors", "Visitantes no Mês", self.visitors, format_change(self.visitors_change), "user-plus", "green", "/visitors"),
            StatCard("departments", "Departamentos", self.departments, "", "calendar", "purple", "/departments"),
            StatCard("birthdays", "Aniversariantes do Mês", len(self.birthdays), "", "cake", "yellow", "/members/birthdays"),
        ]

    def as_dict(self) -> dict:
        return {
            "cards": [c.as_dict() for c in self.cards()],
            "birthdays": [
                {"id": b.record.id, "name": b.record.full_name, "day": b.day, "age": b.age}
                for b in self.birthdays
            ],
            "recent_activity": [a.as_dict() for a in self.recent],
        }


class DashboardService:
    """Home page numbers: period growth, birthdays and the latest registrations."""

    def __init__(
        self,
        fetcher: RecordFetcher,
        departments: DepartmentRepository,
        *,
        period: Optional[PeriodSettings] = None,
        clock: Callable[[], datetime] = now_local,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
    ):
        self._fetcher = fetcher
        self._departments = departments
        self._period = period or PeriodSettings()
        self._clock = clock
        self._recent_limit = recent_limit

    def summary(self, tenant_id: str) -> DashboardSummary:
        now = self._clock()
        windows = self._period.windows(now)

        members = self._count(RecordKind.MEMBERS, tenant_id, "created_at", windows.current)
        members_prev = self._count(RecordKind.MEMBERS, tenant_id, "created_at", windows.previous)
        visitors = self._count(RecordKind.VISITORS, tenant_id, "visit_date", windows.current)
        visitors_prev = self._count(RecordKind.VISITORS, tenant_id, "visit_date", windows.previous)

        all_members = self._fetcher.fetch(RecordQuery(kind=RecordKind.MEMBERS, tenant_id=tenant_id))

        return DashboardSummary(
            members=members,
            members_change=change_rate(members, members_prev),
            visitors=visitors,
            visitors_change=change_rate(visitors, visitors_prev),
            departments=len(self._departments.list_all(tenant_id)),
            birthdays=birthdays_in_month(all_members, now),
            recent=self.recent_activity(tenant_id),
        )

    def recent_activity(self, tenant_id: str) -> list[RecentActivity]:
        visitors = self._fetcher.fetch(
            RecordQuery(
                kind=RecordKind.VISITORS,
                tenant_id=tenant_id,
                order_by="created_at",
                direction=SortDirection.DESC,
                limit=self._recent_limit,
            )
        )
        members = self._fetcher.fetch(
            RecordQuery(
                kind=RecordKind.MEMBERS,
                tenant_id=tenant_id,
                order_by="created_at",
                direction=SortDirection.DESC,
                limit=self._recent_limit,
            )
        )
        activities = [RecentActivity(v.id, ActivityType.VISITOR, v.name, as_datetime(v.created_at)) for v in visitors]
        activities += [RecentActivity(m.id, ActivityType.MEMBER, m.full_name, as_datetime(m.created_at)) for m in members]
        activities.sort(key=lambda a: a.date or datetime.min, reverse=True)
        return activities[: self._recent_limit]

    def _count(self, kind: RecordKind, tenant_id: str, field_name: str, window: TimeWindow) -> int:
        return self._fetcher.count(RecordQuery(kind=kind, tenant_id=tenant_id, range_field=field_name, range=window))
