from __future__ import annotations

from dataclasses import replace
from datetime import date
from types import MappingProxyType
from typing import Collection, Mapping, Optional, Sequence, TypeVar

from ..core.enums import AttendanceStatus

Attendance = Mapping[str, AttendanceStatus]

E = TypeVar("E")


def freeze_attendance(attendance: Optional[Attendance]) -> Attendance:
    """Read-only copy, so a stored entity cannot be edited through its attendance."""

    return MappingProxyType(dict(attendance or {}))


def decode_attendance(raw: Optional[Mapping[str, str]]) -> dict[str, AttendanceStatus]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise TypeError(f"attendance must be a JSON object, got {type(raw).__name__}")
    return {str(day): AttendanceStatus(status) for day, status in raw.items()}


def encode_attendance(attendance: Attendance) -> dict[str, str]:
    return {day: AttendanceStatus(status).value for day, status in attendance.items()}


def mark(attendance: Attendance, *, on: date, status: AttendanceStatus) -> dict[str, AttendanceStatus]:
    """Return a copy with ``on`` set to ``status``; other dates are untouched."""

    updated = dict(attendance)
    updated[on.isoformat()] = AttendanceStatus(status)
    return updated


def mark_entities(
    entities: Sequence[E],
    ids: Collection[str],
    *,
    on: date,
    status: AttendanceStatus,
) -> Optional[tuple[E, ...]]:
    """Mark every entity whose id is in ``ids``.

    Works for any entity with ``id`` and ``attendance`` fields (students, teachers).
    Returns None when no entity matched so callers can skip the write.
    """

    wanted = set(ids)
    matched = False
    out: list[E] = []
    for e in entities:
        if e.id in wanted:
            matched = True
            out.append(replace(e, attendance=mark(e.attendance, on=on, status=status)))
        else:
            out.append(e)
    return tuple(out) if matched else None
