from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from .model import SmallGroup


class SmallGroupRepository(Protocol):
    def list_all(self, tenant_id: str) -> Sequence[SmallGroup]:
        raise NotImplementedError

    def get_by_id(self, tenant_id: str, group_id: str) -> Optional[SmallGroup]:
        raise NotImplementedError

    def member_counts(self, tenant_id: str) -> Mapping[str, int]:
        """Number of members per group id; groups without members are absent."""
        raise NotImplementedError

    def create(self, tenant_id: str, group: SmallGroup) -> str:
        raise NotImplementedError

    def delete(self, tenant_id: str, group_id: str) -> bool:
        raise NotImplementedError

    def add_member(self, tenant_id: str, group_id: str, member_id: str) -> bool:
        raise NotImplementedError

    def remove_member(self, tenant_id: str, group_id: str, member_id: str) -> bool:
        raise NotImplementedError
