"""Shared helpers for the Flask controllers."""

from __future__ import annotations

from datetime import date
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, today_local

MODE_SESSION_KEY = "mode"


def current_role() -> Role:
    try:
        return Role(session.get(MODE_SESSION_KEY, Role.ADMIN.value))
    except ValueError:
        return Role.ADMIN


def admin_required(view):
    """Reject the request while the portal is switched to guardian mode."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_role() != Role.ADMIN:
            return jsonify({"error": "Admin mode required"}), 403
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def parse_date_arg(value: Optional[str]) -> date:
    """Explicit YYYY-MM-DD, or today's local date when omitted."""

    if not value:
        return today_local()
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError("Date must be YYYY-MM-DD")


def parse_int_arg(value, field_name: str, default: int) -> int:
    if value in (None, ""):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")


def require_id_list(value, field_name: str = "ids") -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, (str, int)) for v in value):
        raise ValidationError(f"{field_name} must be a list of ids")
    return [str(v) for v in value]
