from __future__ import annotations

from typing import Optional, Protocol

from .model import Member, MemberDraft


class MemberRepository(Protocol):
    """Write-side repository for members; reads for listings go through RecordFetcher.

    Every method takes the tenant explicitly.
    """

    def get_by_id(self, tenant_id: str, member_id: str) -> Optional[Member]:
        raise NotImplementedError

    def create(self, tenant_id: str, draft: MemberDraft) -> str:
        raise NotImplementedError

    def update(self, tenant_id: str, member_id: str, draft: MemberDraft) -> bool:
        raise NotImplementedError

    def delete(self, tenant_id: str, member_id: str) -> bool:
        raise NotImplementedError
