from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..attendance.marking import decode_attendance, encode_attendance, freeze_attendance
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Teacher:
    """Domain entity: Teacher (same lifecycle as Student, without grades)."""

    id: str
    name: str
    department: str
    email: str
    avatar: str = ""
    attendance: Mapping[str, AttendanceStatus] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "attendance", freeze_attendance(self.attendance))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "department": self.department,
            "email": self.email,
            "avatar": self.avatar,
            "attendance": encode_attendance(self.attendance),
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Teacher":
        return cls(
            id=str(raw["id"]),
            name=str(raw["name"]),
            department=str(raw.get("department", "")),
            email=str(raw.get("email", "")),
            avatar=str(raw.get("avatar", "")),
            attendance=decode_attendance(raw.get("attendance")),
        )
