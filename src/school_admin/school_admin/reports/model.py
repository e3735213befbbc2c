from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..students.model import Grade


@dataclass(frozen=True)
class ReportSettings:
    """Single global record used to sign and stamp report cards."""

    head_of_school: str = "S. Thompson"
    signature: str = ""
    auth_prefix: str = "ES-2024-TR"

    def to_dict(self) -> dict[str, Any]:
        return {"headOfSchool": self.head_of_school, "signature": self.signature, "authPrefix": self.auth_prefix}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ReportSettings":
        return cls(
            head_of_school=str(raw.get("headOfSchool", "")),
            signature=str(raw.get("signature", "")),
            auth_prefix=str(raw.get("authPrefix", "")),
        )


@dataclass(frozen=True)
class ReportCard:
    """Read-model for one printable terminal report (never persisted)."""

    student_id: str
    student_name: str
    grade_level: str
    section: str
    avatar: str
    guardian_name: str
    term: int
    grades: tuple[Grade, ...]
    average_percentage: Optional[float]
    attendance_rate: int
    present_days: int
    recorded_days: int
    head_of_school: str
    signature: str
    auth_code: str
    school_logo: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "studentId": self.student_id,
            "studentName": self.student_name,
            "gradeLevel": self.grade_level,
            "section": self.section,
            "avatar": self.avatar,
            "guardianName": self.guardian_name,
            "term": self.term,
            "grades": [g.to_dict() for g in self.grades],
            "averagePercentage": self.average_percentage,
            "attendanceRate": self.attendance_rate,
            "presentDays": self.present_days,
            "recordedDays": self.recorded_days,
            "headOfSchool": self.head_of_school,
            "signature": self.signature,
            "authCode": self.auth_code,
            "schoolLogo": self.school_logo,
        }
