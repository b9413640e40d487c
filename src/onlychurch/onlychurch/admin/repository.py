from __future__ import annotations

from typing import Optional, Protocol

from ..stats.windows import TimeWindow


class AdminRepository(Protocol):
    """Platform-wide reads for the admin console; not tenant scoped."""

    def is_admin(self, user_id: str) -> bool:
        raise NotImplementedError

    def count_users(self, *, field: str = "created_at", window: Optional[TimeWindow] = None) -> int:
        raise NotImplementedError

    def count_churches(self, *, window: Optional[TimeWindow] = None) -> int:
        raise NotImplementedError
