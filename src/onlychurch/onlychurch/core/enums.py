from __future__ import annotations

from enum import Enum


class RecordKind(str, Enum):
    """Tenant-scoped tables the reporting pipeline can read."""

    MEMBERS = "membros"
    VISITORS = "cadastro_visitantes"
    EVENTS = "calendar_events"
    CHILDREN = "criancas"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class PeriodMode(str, Enum):
    """How "current period" vs "previous period" is cut."""

    ROLLING = "rolling"
    CALENDAR_MONTH = "calendar_month"


class GroupStatus(str, Enum):
    ACTIVE = "ativo"
    INACTIVE = "inativo"


class ActivityType(str, Enum):
    VISITOR = "visitor"
    MEMBER = "member"
