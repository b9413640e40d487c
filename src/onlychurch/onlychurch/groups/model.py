from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import GroupStatus


@dataclass(frozen=True)
class SmallGroup:
    """Small group (pequeno grupo) with its leader resolved from `membros`."""

    group_id: str
    name: str
    status: GroupStatus
    leader_id: Optional[str] = None
    leader_name: Optional[str] = None
    meeting_day: Optional[str] = None
    meeting_time: Optional[str] = None
    address: Optional[str] = None
