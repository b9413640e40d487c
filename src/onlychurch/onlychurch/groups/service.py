from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ..common.validators import optional_text, require_non_empty
from ..core.enums import GroupStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import SmallGroup
from .repository import SmallGroupRepository


@dataclass(frozen=True)
class GroupView:
    group: SmallGroup
    member_count: int

    def as_dict(self) -> dict:
        g = self.group
        return {
            "id": g.group_id,
            "name": g.name,
            "status": g.status.value,
            "leader_id": g.leader_id,
            "leader_name": g.leader_name,
            "meeting_day": g.meeting_day,
            "meeting_time": g.meeting_time,
            "address": g.address,
            "member_count": self.member_count,
        }


class SmallGroupService:
    def __init__(self, groups: SmallGroupRepository):
        self._groups = groups

    def list_groups(self, tenant_id: str) -> list[GroupView]:
        counts = self._groups.member_counts(tenant_id)
        return [GroupView(g, counts.get(g.group_id, 0)) for g in self._groups.list_all(tenant_id)]

    def group_stats(self, tenant_id: str) -> dict:
        views = self.list_groups(tenant_id)
        return {
            "total": len(views),
            "active": sum(1 for v in views if v.group.status == GroupStatus.ACTIVE),
            "members": sum(v.member_count for v in views),
        }

    def create_group(self, tenant_id: str, form: Mapping) -> str:
        try:
            status = GroupStatus(optional_text(form.get("status")) or GroupStatus.ACTIVE.value)
        except ValueError:
            raise ValidationError("Status do grupo inválido")

        group = SmallGroup(
            group_id="",
            name=require_non_empty(form.get("name"), "Nome do grupo"),
            status=status,
            leader_id=optional_text(form.get("leader_id")),
            meeting_day=optional_text(form.get("meeting_day")),
            meeting_time=optional_text(form.get("meeting_time")),
            address=optional_text(form.get("address")),
        )
        return self._groups.create(tenant_id, group)

    def delete_group(self, tenant_id: str, group_id: str) -> None:
        if not self._groups.delete(tenant_id, group_id):
            raise NotFoundError("Grupo não encontrado")

    def add_member(self, tenant_id: str, group_id: str, member_id: str) -> None:
        if not self._groups.get_by_id(tenant_id, group_id):
            raise NotFoundError("Grupo não encontrado")
        member_id = require_non_empty(member_id, "Membro")
        if not self._groups.add_member(tenant_id, group_id, member_id):
            raise ValidationError("Membro não encontrado ou já participa do grupo")

    def remove_member(self, tenant_id: str, group_id: str, member_id: str) -> None:
        if not self._groups.remove_member(tenant_id, group_id, member_id):
            raise NotFoundError("Membro não participa deste grupo")
