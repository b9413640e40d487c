from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from ..core.constants import MAX_PHONE_DIGITS
from ..core.exceptions import ValidationError

EMAIL_REGEX = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE)


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} é obrigatório")
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    v = (value or "").strip()
    return v or None


def optional_email(value: Optional[str]) -> Optional[str]:
    v = optional_text(value)
    if v and not EMAIL_REGEX.match(v):
        raise ValidationError("Email inválido")
    return v


def mask_phone(value: Optional[str]) -> Optional[str]:
    """Keep digits only, capped at 11 (DDD + 9 digits)."""
    digits = re.sub(r"\D", "", value or "")
    return digits[:MAX_PHONE_DIGITS] or None


def optional_date(value, field_name: str) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip()[:10], "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{field_name} inválida (AAAA-MM-DD)")


def optional_datetime(value, field_name: str) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).strip().replace("Z", ""))
    except ValueError:
        raise ValidationError(f"{field_name} inválida")


def parse_flag(value) -> bool:
    """Form checkboxes arrive as 'sim'/'true'/'on'/'1' or real booleans."""
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in {"1", "true", "on", "sim", "yes"}
