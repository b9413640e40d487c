from __future__ import annotations

from typing import Protocol

from .model import VisitorDraft


class VisitorRepository(Protocol):
    def create(self, tenant_id: str, draft: VisitorDraft) -> str:
        raise NotImplementedError

    def delete(self, tenant_id: str, visitor_id: str) -> bool:
        raise NotImplementedError
