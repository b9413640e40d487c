from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from ..common.validators import optional_text, require_non_empty
from ..core.enums import RecordKind
from ..core.exceptions import NotFoundError, ValidationError
from ..records.fetcher import RecordFetcher
from ..records.model import RecordQuery
from ..stats.aggregator import aggregate
from .model import Department
from .repository import DepartmentRepository


@dataclass(frozen=True)
class DepartmentView:
    department: Department
    member_count: int

    def as_dict(self) -> dict:
        d = self.department
        return {
            "id": d.dept_id,
            "name": d.name,
            "leader_id": d.leader_id,
            "leader_name": d.leader_name,
            "second_leader_id": d.second_leader_id,
            "second_leader_name": d.second_leader_name,
            "member_count": self.member_count,
        }


class DepartmentService:
    """Departments are linked to members by name (`membros.departamento`)."""

    def __init__(self, departments: DepartmentRepository, fetcher: RecordFetcher):
        self._departments = departments
        self._fetcher = fetcher

    def list_departments(self, tenant_id: str, *, search: Optional[str] = None) -> list[DepartmentView]:
        departments = self._departments.list_all(tenant_id, search=search)
        members = self._fetcher.fetch(RecordQuery(kind=RecordKind.MEMBERS, tenant_id=tenant_id))
        counts = aggregate(members, lambda m: m.department, labels=[d.name.strip() for d in departments])
        return [DepartmentView(d, counts.get(d.name.strip())) for d in departments]

    def department_stats(self, tenant_id: str) -> dict:
        departments = self._departments.list_all(tenant_id)
        names = {d.name.strip() for d in departments}
        members = self._fetcher.fetch(RecordQuery(kind=RecordKind.MEMBERS, tenant_id=tenant_id))
        active_children = self._fetcher.count(
            RecordQuery(kind=RecordKind.CHILDREN, tenant_id=tenant_id, equals={"active": True})
        )
        return {
            "departments": len(departments),
            "members_in_departments": sum(1 for m in members if (m.department or "").strip() in names),
            "active_children": active_children,
        }

    def create_department(self, tenant_id: str, form: Mapping) -> str:
        name, leader_id, second_leader_id = self._read_form(form)
        if self._departments.get_by_name(tenant_id, name):
            raise ValidationError("Já existe um departamento com este nome")
        return self._departments.create(tenant_id, name=name, leader_id=leader_id, second_leader_id=second_leader_id)

    def update_department(self, tenant_id: str, dept_id: str, form: Mapping) -> None:
        if not self._departments.get_by_id(tenant_id, dept_id):
            raise NotFoundError("Departamento não encontrado")
        name, leader_id, second_leader_id = self._read_form(form)
        existing = self._departments.get_by_name(tenant_id, name)
        if existing and existing.dept_id != dept_id:
            raise ValidationError("Já existe um departamento com este nome")
        self._departments.update(
            tenant_id, dept_id, name=name, leader_id=leader_id, second_leader_id=second_leader_id
        )

    def delete_department(self, tenant_id: str, dept_id: str) -> None:
        if not self._departments.delete(tenant_id, dept_id):
            raise NotFoundError("Departamento não encontrado")

    @staticmethod
    def _read_form(form: Mapping) -> tuple[str, Optional[str], Optional[str]]:
        name = require_non_empty(form.get("name"), "Nome do departamento")
        leader_id = optional_text(form.get("leader_id"))
        second_leader_id = optional_text(form.get("second_leader_id"))
        if leader_id and leader_id == second_leader_id:
            raise ValidationError("Os responsáveis devem ser pessoas diferentes")
        return name, leader_id, second_leader_id
