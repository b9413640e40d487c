from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .admin.mysql_admin_repository import MySQLAdminRepository
from .admin.service import AdminService
from .children.mysql_children_repository import MySQLChildrenRepository
from .children.service import ChildrenService
from .core.constants import DEFAULT_ROLLING_DAYS
from .core.enums import PeriodMode
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.service import DepartmentService
from .events.mysql_event_repository import MySQLEventRepository
from .events.service import EventService
from .groups.mysql_group_repository import MySQLSmallGroupRepository
from .groups.service import SmallGroupService
from .members.mysql_member_repository import MySQLMemberRepository
from .members.service import MemberService
from .records.fetcher import RecordFetcher
from .records.mysql_record_store import MySQLRecordStore
from .registration.service import RegistrationService
from .stats.windows import PeriodSettings
from .visitors.mysql_visitor_repository import MySQLVisitorRepository
from .visitors.service import VisitorService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    fetcher: RecordFetcher
    period: PeriodSettings

    member_service: MemberService
    visitor_service: VisitorService
    department_service: DepartmentService
    group_service: SmallGroupService
    children_service: ChildrenService
    event_service: EventService
    dashboard_service: DashboardService
    admin_service: AdminService
    registration_service: RegistrationService


def build_container(
    *,
    db_config: dict,
    period_mode: str = PeriodMode.ROLLING.value,
    rolling_days: int = DEFAULT_ROLLING_DAYS,
    webhook_url: Optional[str] = None,
    webhook_timeout: float = 10,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))
    fetcher = RecordFetcher(MySQLRecordStore(conn))
    period = PeriodSettings(mode=PeriodMode(period_mode), days=int(rolling_days))

    departments_repo = MySQLDepartmentRepository(conn)

    return Container(
        conn=conn,
        fetcher=fetcher,
        period=period,
        member_service=MemberService(MySQLMemberRepository(conn), fetcher, period=period),
        visitor_service=VisitorService(MySQLVisitorRepository(conn), fetcher, period=period),
        department_service=DepartmentService(departments_repo, fetcher),
        group_service=SmallGroupService(MySQLSmallGroupRepository(conn)),
        children_service=ChildrenService(MySQLChildrenRepository(conn), fetcher),
        event_service=EventService(MySQLEventRepository(conn), fetcher),
        dashboard_service=DashboardService(fetcher, departments_repo, period=period),
        admin_service=AdminService(MySQLAdminRepository(conn)),
        registration_service=RegistrationService(webhook_url, timeout=webhook_timeout),
    )
