from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import ClassVar, Optional

from ..records.rows import as_bool, as_date, as_text


@dataclass(frozen=True)
class Visitor:
    """Domain entity: a visitor registration (`cadastro_visitantes` row)."""

    COLUMNS: ClassVar[dict[str, str]] = {
        "id": "id",
        "tenant_id": "user_id",
        "name": "nome",
        "email": "email",
        "phone": "telefone",
        "whatsapp": "whatsapp",
        "address": "endereco",
        "visit_date": "data_visita",
        "birth_date": "data_nascimento",
        "marital_status": "estado_civil",
        "source": "como_conheceu",
        "wants_devotional": "receber_devocional",
        "wants_agenda": "receber_agenda",
        "created_at": "created_at",
    }

    id: str
    tenant_id: str
    name: str
    visit_date: Optional[datetime] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    address: Optional[str] = None
    birth_date: Optional[date] = None
    marital_status: Optional[str] = None
    source: Optional[str] = None
    wants_devotional: bool = False
    wants_agenda: bool = False
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: dict) -> "Visitor":
        return cls(
            id=str(row["id"]),
            tenant_id=str(row["user_id"]),
            name=row["nome"],
            visit_date=row.get("data_visita"),
            email=as_text(row.get("email")),
            phone=as_text(row.get("telefone")),
            whatsapp=as_text(row.get("whatsapp")),
            address=as_text(row.get("endereco")),
            birth_date=as_date(row.get("data_nascimento")),
            marital_status=as_text(row.get("estado_civil")),
            source=as_text(row.get("como_conheceu")),
            wants_devotional=as_bool(row.get("receber_devocional")),
            wants_agenda=as_bool(row.get("receber_agenda")),
            created_at=row.get("created_at"),
        )


@dataclass(frozen=True)
class VisitorDraft:
    name: str
    visit_date: datetime
    email: Optional[str] = None
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    address: Optional[str] = None
    birth_date: Optional[date] = None
    marital_status: Optional[str] = None
    source: Optional[str] = None
    wants_devotional: bool = False
    wants_agenda: bool = False
