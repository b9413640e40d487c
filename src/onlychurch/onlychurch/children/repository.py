from __future__ import annotations

from typing import Protocol, Sequence

from ..stats.windows import TimeWindow
from .model import AttendanceMark, ChildClass, ChildDraft


class ChildrenRepository(Protocol):
    """Writes for children plus the class and attendance tables."""

    def create_child(self, tenant_id: str, draft: ChildDraft) -> str:
        raise NotImplementedError

    def list_classes(self, tenant_id: str, *, active_only: bool = True) -> Sequence[ChildClass]:
        raise NotImplementedError

    def create_class(self, tenant_id: str, child_class: ChildClass) -> str:
        raise NotImplementedError

    def record_attendance(self, tenant_id: str, marks: Sequence[AttendanceMark]) -> int:
        raise NotImplementedError

    def attendance_totals(self, tenant_id: str, window: TimeWindow) -> tuple[int, int]:
        """(present, total) attendance rows whose class date falls in `window`."""
        raise NotImplementedError
