from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def list_all(self, tenant_id: str, *, search: Optional[str] = None) -> Sequence[Department]:
        raise NotImplementedError

    def get_by_id(self, tenant_id: str, dept_id: str) -> Optional[Department]:
        raise NotImplementedError

    def get_by_name(self, tenant_id: str, name: str) -> Optional[Department]:
        raise NotImplementedError

    def create(self, tenant_id: str, *, name: str, leader_id: Optional[str], second_leader_id: Optional[str]) -> str:
        raise NotImplementedError

    def update(
        self, tenant_id: str, dept_id: str, *, name: str, leader_id: Optional[str], second_leader_id: Optional[str]
    ) -> bool:
        raise NotImplementedError

    def delete(self, tenant_id: str, dept_id: str) -> bool:
        raise NotImplementedError
