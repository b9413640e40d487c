from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import ClassVar, Optional

from ..records.rows import as_date, as_text


@dataclass(frozen=True)
class Member:
    """Domain entity: a church member (`membros` row).

    Note: Plain data object; repositories own all store access.
    """

    COLUMNS: ClassVar[dict[str, str]] = {
        "id": "id",
        "tenant_id": "user_id",
        "full_name": "nome_completo",
        "birth_date": "data_nascimento",
        "email": "email",
        "phone": "telefone",
        "mobile": "celular",
        "department": "departamento",
        "ministry_role": "cargo_ministerial",
        "marital_status": "estado_civil",
        "baptism_date": "data_batismo",
        "member_since": "data_membro",
        "photo_url": "foto_url",
        "created_at": "created_at",
    }

    id: str
    tenant_id: str
    full_name: str
    created_at: Optional[datetime] = None
    birth_date: Optional[date] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    department: Optional[str] = None
    ministry_role: Optional[str] = None
    marital_status: Optional[str] = None
    baptism_date: Optional[date] = None
    member_since: Optional[date] = None
    photo_url: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> "Member":
        return cls(
            id=str(row["id"]),
            tenant_id=str(row["user_id"]),
            full_name=row["nome_completo"],
            created_at=row.get("created_at"),
            birth_date=as_date(row.get("data_nascimento")),
            email=as_text(row.get("email")),
            phone=as_text(row.get("telefone")),
            mobile=as_text(row.get("celular")),
            department=as_text(row.get("departamento")),
            ministry_role=as_text(row.get("cargo_ministerial")),
            marital_status=as_text(row.get("estado_civil")),
            baptism_date=as_date(row.get("data_batismo")),
            member_since=as_date(row.get("data_membro")),
            photo_url=as_text(row.get("foto_url")),
        )


@dataclass(frozen=True)
class MemberDraft:
    """Validated input for create/update (no id, no tenant)."""

    full_name: str
    birth_date: Optional[date] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    department: Optional[str] = None
    ministry_role: Optional[str] = None
    marital_status: Optional[str] = None
    baptism_date: Optional[date] = None
    member_since: Optional[date] = None
    photo_url: Optional[str] = None
