from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Department:
    dept_id: str
    name: str
    leader_id: Optional[str] = None
    second_leader_id: Optional[str] = None
    leader_name: Optional[str] = None
    second_leader_name: Optional[str] = None
