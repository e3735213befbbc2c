from __future__ import annotations

import math
import re

from ..core.constants import MAX_SCORE, MIN_SCORE, TERMS
from ..core.enums import AttendanceStatus, NotificationCategory
from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_email(value: str, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(value):
        raise ValidationError(f"{field_name} must be a valid e-mail address")
    return value


def require_score(value) -> float:
    try:
        score = float(value)
    except (TypeError, ValueError):
        raise ValidationError("Score must be a number")
    if not math.isfinite(score):
        raise ValidationError("Score must be a number")
    if score < MIN_SCORE or score > MAX_SCORE:
        raise ValidationError(f"Score must be between {MIN_SCORE} and {MAX_SCORE}")
    return int(score) if score.is_integer() else score


def require_term(value) -> int:
    try:
        term = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Term must be a number")
    if term not in TERMS:
        raise ValidationError(f"Term must be one of {', '.join(str(t) for t in TERMS)}")
    return term


def require_attendance_status(value) -> AttendanceStatus:
    try:
        return AttendanceStatus(str(value or "").upper())
    except ValueError:
        raise ValidationError("Attendance status must be PRESENT, ABSENT or LATE")


def require_category(value) -> NotificationCategory:
    try:
        return NotificationCategory(str(value or "GENERAL").upper())
    except ValueError:
        raise ValidationError("Unknown message category")
