from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import ClassVar, Optional

from ..records.rows import as_bool, as_date, as_text


@dataclass(frozen=True)
class Child:
    """Domain entity: a child in the children's ministry (`criancas` row)."""

    COLUMNS: ClassVar[dict[str, str]] = {
        "id": "id",
        "tenant_id": "user_id",
        "full_name": "nome_completo",
        "birth_date": "data_nascimento",
        "guardian_name": "nome_responsavel",
        "guardian_phone": "telefone_responsavel",
        "class_id": "turma_id",
        "allergies": "alergias",
        "active": "ativo",
        "created_at": "created_at",
    }

    id: str
    tenant_id: str
    full_name: str
    birth_date: Optional[date] = None
    guardian_name: Optional[str] = None
    guardian_phone: Optional[str] = None
    class_id: Optional[str] = None
    allergies: Optional[str] = None
    active: bool = True
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: dict) -> "Child":
        return cls(
            id=str(row["id"]),
            tenant_id=str(row["user_id"]),
            full_name=row["nome_completo"],
            birth_date=as_date(row.get("data_nascimento")),
            guardian_name=as_text(row.get("nome_responsavel")),
            guardian_phone=as_text(row.get("telefone_responsavel")),
            class_id=as_text(row.get("turma_id")),
            allergies=as_text(row.get("alergias")),
            active=as_bool(row.get("ativo", True)),
            created_at=row.get("created_at"),
        )


@dataclass(frozen=True)
class ChildClass:
    class_id: str
    name: str
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    active: bool = True


@dataclass(frozen=True)
class AttendanceMark:
    child_id: str
    class_id: Optional[str]
    class_date: date
    present: bool


@dataclass(frozen=True)
class ChildDraft:
    full_name: str
    birth_date: Optional[date] = None
    guardian_name: Optional[str] = None
    guardian_phone: Optional[str] = None
    class_id: Optional[str] = None
    allergies: Optional[str] = None
    active: bool = True
