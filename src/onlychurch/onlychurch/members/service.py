from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Mapping, Optional

from ..common.datetime_utils import now_local
from ..common.validators import mask_phone, optional_date, optional_email, optional_text, require_non_empty
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import RecordKind, SortDirection
from ..core.exceptions import NotFoundError, ValidationError
from ..records.fetcher import RecordFetcher
from ..records.model import Page, RecordQuery
from ..stats.aggregator import AggregationResult, age_distribution, aggregate, count_where
from ..stats.birthdays import BirthdayEntry, birthdays_in_month, previous_month
from ..stats.change_rate import change_rate, share
from ..stats.presentation import StatCard, chart_series, format_change
from ..stats.windows import PeriodSettings, month_to_date, partition, timestamp_of
from .model import Member, MemberDraft
from .repository import MemberRepository


@dataclass(frozen=True)
class MemberAnalytics:
    total: int
    baptized: int
    in_departments: int
    leaders: int
    joined_this_month: int
    new_members: int
    new_members_previous: int
    new_members_change: int
    birthdays: int
    birthdays_last_month: int
    birthday_change: int
    charts: dict[str, AggregationResult] = field(default_factory=dict)

    def cards(self) -> list[StatCard]:
        return [
            StatCard("total", "Total de Membros", self.total, format_change(self.new_members_change), "users", "blue"),
            StatCard("joined", "Novos Membros (Mês)", self.joined_this_month, f"+{self.joined_this_month}", "user-plus", "green"),
            StatCard("baptized", "Membros Batizados", self.baptized, f"{share(self.baptized, self.total)}%", "church", "purple"),
            StatCard("birthdays", "Aniversariantes do Mês", self.birthdays, format_change(self.birthday_change), "cake", "yellow"),
        ]

    def as_dict(self) -> dict:
        return {
            "total": self.total,
            "baptized": self.baptized,
            "in_departments": self.in_departments,
            "leaders": self.leaders,
            "joined_this_month": self.joined_this_month,
            "new_members": self.new_members,
            "new_members_previous": self.new_members_previous,
            "new_members_change": self.new_members_change,
            "birthdays": self.birthdays,
            "birthdays_last_month": self.birthdays_last_month,
            "birthday_change": self.birthday_change,
            "cards": [c.as_dict() for c in self.cards()],
            "charts": {name: chart_series(result) for name, result in self.charts.items()},
        }


def member_draft_from_form(form: Mapping) -> MemberDraft:
    return MemberDraft(
        full_name=require_non_empty(form.get("full_name"), "Nome completo"),
        birth_date=optional_date(form.get("birth_date"), "Data de nascimento"),
        email=optional_email(form.get("email")),
        phone=mask_phone(form.get("phone")),
        mobile=mask_phone(form.get("mobile")),
        department=optional_text(form.get("department")),
        ministry_role=optional_text(form.get("ministry_role")),
        marital_status=optional_text(form.get("marital_status")),
        baptism_date=optional_date(form.get("baptism_date"), "Data de batismo"),
        member_since=optional_date(form.get("member_since"), "Data de membro"),
        photo_url=optional_text(form.get("photo_url")),
    )


class MemberService:
    """Use cases for the member pages: registry, birthday list and analytics."""

    def __init__(
        self,
        members: MemberRepository,
        fetcher: RecordFetcher,
        *,
        period: Optional[PeriodSettings] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._members = members
        self._fetcher = fetcher
        self._period = period or PeriodSettings()
        self._clock = clock

    def list_members(self, tenant_id: str, *, search: Optional[str] = None, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page:
        page = max(1, int(page))
        base = RecordQuery(kind=RecordKind.MEMBERS, tenant_id=tenant_id, search=search)
        items = self._fetcher.fetch(
            RecordQuery(
                kind=RecordKind.MEMBERS,
                tenant_id=tenant_id,
                search=search,
                order_by="created_at",
                direction=SortDirection.DESC,
                limit=page_size,
                offset=(page - 1) * page_size,
            )
        )
        return Page(items=items, total=self._fetcher.count(base), page=page, page_size=page_size)

    def all_members(self, tenant_id: str, *, search: Optional[str] = None) -> list[Member]:
        return self._fetcher.fetch(
            RecordQuery(
                kind=RecordKind.MEMBERS,
                tenant_id=tenant_id,
                search=search,
                order_by="full_name",
            )
        )

    def get_member(self, tenant_id: str, member_id: str) -> Member:
        member = self._members.get_by_id(tenant_id, member_id)
        if not member:
            raise NotFoundError("Membro não encontrado")
        return member

    def register_member(self, tenant_id: str, form: Mapping) -> str:
        if not tenant_id:
            raise ValidationError("Igreja não identificada")
        return self._members.create(tenant_id, member_draft_from_form(form))

    def update_member(self, tenant_id: str, member_id: str, form: Mapping) -> None:
        self.get_member(tenant_id, member_id)
        self._members.update(tenant_id, member_id, member_draft_from_form(form))

    def delete_member(self, tenant_id: str, member_id: str) -> None:
        if not self._members.delete(tenant_id, member_id):
            raise NotFoundError("Membro não encontrado")

    def birthdays_this_month(self, tenant_id: str, *, search: Optional[str] = None) -> list[BirthdayEntry[Member]]:
        members = self._fetcher.fetch(
            RecordQuery(
                kind=RecordKind.MEMBERS,
                tenant_id=tenant_id,
                search=search,
                order_by="birth_date",
            )
        )
        return birthdays_in_month(members, self._clock())

    def joined_this_month(self, tenant_id: str, *, search: Optional[str] = None) -> list[Member]:
        now = self._clock()
        return self._fetcher.fetch(
            RecordQuery(
                kind=RecordKind.MEMBERS,
                tenant_id=tenant_id,
                search=search,
                range_field="member_since",
                range=month_to_date(now),
                order_by="member_since",
                direction=SortDirection.DESC,
            )
        )

    def member_analytics(self, tenant_id: str) -> MemberAnalytics:
        now = self._clock()
        members = self._fetcher.fetch(RecordQuery(kind=RecordKind.MEMBERS, tenant_id=tenant_id))

        growth = partition(members, self._period.windows(now), timestamp_of("created_at"))
        new_members = len(growth.current)
        new_members_previous = len(growth.previous)

        joined = self._fetcher.count(
            RecordQuery(
                kind=RecordKind.MEMBERS,
                tenant_id=tenant_id,
                range_field="member_since",
                range=month_to_date(now),
            )
        )

        birthdays = len(birthdays_in_month(members, now))
        birthdays_last_month = len(birthdays_in_month(members, now, month=previous_month(now)))

        return MemberAnalytics(
            total=len(members),
            baptized=count_where(members, lambda m: m.baptism_date is not None),
            in_departments=count_where(members, lambda m: bool(m.department)),
            leaders=count_where(members, lambda m: bool(m.ministry_role)),
            joined_this_month=joined,
            new_members=new_members,
            new_members_previous=new_members_previous,
            new_members_change=change_rate(new_members, new_members_previous),
            birthdays=birthdays,
            birthdays_last_month=birthdays_last_month,
            birthday_change=change_rate(birthdays, birthdays_last_month),
            charts={
                "age": age_distribution(members, now),
                "marital_status": aggregate(members, lambda m: m.marital_status),
                "department": aggregate(members, lambda m: m.department),
                "ministry_role": aggregate(members, lambda m: m.ministry_role),
            },
        )
