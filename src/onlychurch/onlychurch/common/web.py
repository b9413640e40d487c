"""Shared helpers for the JSON controllers: session tenant, error mapping, CSV export."""
from __future__ import annotations

import csv
import io
import logging
from dataclasses import asdict
from datetime import date
from enum import Enum
from functools import wraps
from typing import Iterable, Mapping, Sequence

from flask import current_app, jsonify, request, session

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    RegistrationError,
    RetrievalError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (RegistrationError, 502),
    (RetrievalError, 503),
]


def error_response(error: DomainError):
    for error_type, status in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return jsonify({"success": False, "message": str(error)}), status
    return jsonify({"success": False, "message": str(error)}), 400


def current_tenant() -> str:
    tenant_id = str(session.get("user_id") or "").strip()
    if not tenant_id:
        raise AuthenticationError("Faça login para continuar")
    return tenant_id


def api_view(view):
    """Turn domain errors into JSON error responses; log anything else as a 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            logger.exception("unhandled error in %s", request.path)
            if current_app.config.get("DEBUG"):
                message = f"Erro interno do servidor: {e}"
            else:
                message = "Erro interno do servidor"
            return jsonify({"success": False, "message": message}), 500

    return wrapper


def tenant_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not str(session.get("user_id") or "").strip():
            return jsonify({"success": False, "message": "Faça login para continuar"}), 401
        return view(*args, **kwargs)

    return wrapper


def record_dict(record) -> dict:
    """Dataclass record as JSON-ready dict: ISO dates, enum values."""
    out = {}
    for key, value in asdict(record).items():
        if isinstance(value, date):
            value = value.isoformat()
        elif isinstance(value, Enum):
            value = value.value
        out[key] = value
    return out


def json_body() -> Mapping:
    data = request.get_json(silent=True)
    if isinstance(data, Mapping):
        return data
    return request.form


def query_page() -> int:
    try:
        return max(1, int(request.args.get("page", 1)))
    except (TypeError, ValueError):
        raise ValidationError("Página inválida")


def csv_response(rows: Iterable[Mapping], *, fieldnames: Sequence[str], filename: str):
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=list(fieldnames), extrasaction="ignore")
    writer.writeheader()
    for row in rows:
        writer.writerow(row)

    csv_bytes = out.getvalue().encode("utf-8-sig")
    return current_app.response_class(
        csv_bytes,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
