from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterable, Mapping, Optional

from ..common.datetime_utils import now_local
from ..common.validators import mask_phone, optional_date, optional_text, parse_flag, require_non_empty
from ..core.enums import RecordKind
from ..core.exceptions import ValidationError
from ..records.fetcher import RecordFetcher
from ..records.model import RecordQuery
from ..stats.change_rate import share
from ..stats.windows import month_to_date
from .model import AttendanceMark, Child, ChildClass, ChildDraft
from .repository import ChildrenRepository


def _optional_int(value, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} deve ser um número")


class ChildrenService:
    """Children's ministry: registrations, classes and weekly attendance."""

    def __init__(
        self,
        children: ChildrenRepository,
        fetcher: RecordFetcher,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._children = children
        self._fetcher = fetcher
        self._clock = clock

    def list_children(self, tenant_id: str, *, search: Optional[str] = None) -> list[Child]:
        return self._fetcher.fetch(
            RecordQuery(kind=RecordKind.CHILDREN, tenant_id=tenant_id, search=search, order_by="full_name")
        )

    def list_classes(self, tenant_id: str) -> list[ChildClass]:
        return list(self._children.list_classes(tenant_id, active_only=True))

    def register_child(self, tenant_id: str, form: Mapping) -> str:
        draft = ChildDraft(
            full_name=require_non_empty(form.get("full_name"), "Nome da criança"),
            birth_date=optional_date(form.get("birth_date"), "Data de nascimento"),
            guardian_name=optional_text(form.get("guardian_name")),
            guardian_phone=mask_phone(form.get("guardian_phone")),
            class_id=optional_text(form.get("class_id")),
            allergies=optional_text(form.get("allergies")),
            active=parse_flag(form.get("active", True)),
        )
        return self._children.create_child(tenant_id, draft)

    def register_class(self, tenant_id: str, form: Mapping) -> str:
        min_age = _optional_int(form.get("min_age"), "Idade mínima")
        max_age = _optional_int(form.get("max_age"), "Idade máxima")
        if min_age is not None and max_age is not None and max_age < min_age:
            raise ValidationError("Idade máxima deve ser maior ou igual à mínima")
        child_class = ChildClass(
            class_id="",
            name=require_non_empty(form.get("name"), "Nome da turma"),
            min_age=min_age,
            max_age=max_age,
        )
        return self._children.create_class(tenant_id, child_class)

    def record_attendance(self, tenant_id: str, *, class_date, entries: Iterable[Mapping]) -> int:
        """Save one roll call; each entry is {child_id, class_id?, present}."""
        day = optional_date(class_date, "Data da aula")
        if day is None:
            raise ValidationError("Data da aula é obrigatória")

        marks = [
            AttendanceMark(
                child_id=require_non_empty(entry.get("child_id"), "Criança"),
                class_id=optional_text(entry.get("class_id")),
                class_date=day,
                present=parse_flag(entry.get("present")),
            )
            for entry in entries
        ]
        if not marks:
            raise ValidationError("Nenhuma presença informada")

        child_ids = {c.id for c in self.list_children(tenant_id)}
        class_ids = {c.class_id for c in self._children.list_classes(tenant_id, active_only=False)}
        for mark in marks:
            if mark.child_id not in child_ids:
                raise ValidationError(f"Criança não encontrada: {mark.child_id}")
            if mark.class_id is not None and mark.class_id not in class_ids:
                raise ValidationError(f"Turma não encontrada: {mark.class_id}")
        return self._children.record_attendance(tenant_id, marks)

    def children_stats(self, tenant_id: str) -> dict:
        now = self._clock()
        children = self.list_children(tenant_id)
        present, total = self._children.attendance_totals(tenant_id, month_to_date(now))
        return {
            "total": len(children),
            "active": sum(1 for c in children if c.active),
            "classes": len(self.list_classes(tenant_id)),
            "attendance_rate": share(present, total),
        }
