"""Normalize values coming back from the MySQL driver.

mysql-connector can return DATE as date or str, BOOLEAN as int, and empty
strings where the form left a field blank.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional


def as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def as_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()
    raise TypeError(f"Unsupported DATE value type: {type(value)!r}")


def as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "sim", "t"}
    return bool(value)
