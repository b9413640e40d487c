from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional

from ..records.rows import as_text


@dataclass(frozen=True)
class CalendarEvent:
    COLUMNS: ClassVar[dict[str, str]] = {
        "id": "id",
        "tenant_id": "user_id",
        "title": "title",
        "description": "description",
        "start_at": "start_at",
        "end_at": "end_at",
        "location": "location",
        "category": "category",
        "created_by": "created_by",
        "created_at": "created_at",
    }

    id: str
    tenant_id: str
    title: str
    start_at: datetime
    end_at: Optional[datetime] = None
    description: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: dict) -> "CalendarEvent":
        return cls(
            id=str(row["id"]),
            tenant_id=str(row["user_id"]),
            title=row["title"],
            start_at=row["start_at"],
            end_at=row.get("end_at"),
            description=as_text(row.get("description")),
            location=as_text(row.get("location")),
            category=as_text(row.get("category")),
            created_by=as_text(row.get("created_by")),
            created_at=row.get("created_at"),
        )


@dataclass(frozen=True)
class EventDraft:
    title: str
    start_at: datetime
    end_at: Optional[datetime] = None
    description: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = None
