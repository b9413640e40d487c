from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from ..children.model import Child
from ..core.enums import RecordKind
from ..core.exceptions import ValidationError
from ..events.model import CalendarEvent
from ..members.model import Member
from ..visitors.model import Visitor


@dataclass(frozen=True)
class RecordSchema:
    """Whitelist of columns per record kind; the only source of SQL identifiers."""

    table: str
    columns: Mapping[str, str]
    factory: Callable[[dict], object]
    search_field: str
    default_order: str
    tenant_field: str = "tenant_id"

    def column(self, attr: Optional[str]) -> str:
        if attr not in self.columns:
            raise ValidationError(f"Campo inválido para {self.table}: {attr}")
        return self.columns[attr]


SCHEMAS: dict[RecordKind, RecordSchema] = {
    RecordKind.MEMBERS: RecordSchema(
        table=RecordKind.MEMBERS.value,
        columns=Member.COLUMNS,
        factory=Member.from_row,
        search_field="full_name",
        default_order="created_at",
    ),
    RecordKind.VISITORS: RecordSchema(
        table=RecordKind.VISITORS.value,
        columns=Visitor.COLUMNS,
        factory=Visitor.from_row,
        search_field="name",
        default_order="visit_date",
    ),
    RecordKind.EVENTS: RecordSchema(
        table=RecordKind.EVENTS.value,
        columns=CalendarEvent.COLUMNS,
        factory=CalendarEvent.from_row,
        search_field="title",
        default_order="start_at",
    ),
    RecordKind.CHILDREN: RecordSchema(
        table=RecordKind.CHILDREN.value,
        columns=Child.COLUMNS,
        factory=Child.from_row,
        search_field="full_name",
        default_order="full_name",
    ),
}


def schema_for(kind: RecordKind) -> RecordSchema:
    return SCHEMAS[RecordKind(kind)]
