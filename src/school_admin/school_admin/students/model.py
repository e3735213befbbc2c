from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..attendance.marking import decode_attendance, encode_attendance, freeze_attendance
from ..core.constants import DEFAULT_MAX_SCORE
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Grade:
    """Domain entity: one score for a (subject, term) pair."""

    subject: str
    score: float
    term: int
    max_score: float = DEFAULT_MAX_SCORE

    @property
    def percentage(self) -> float:
        if not self.max_score:
            return 0.0
        return self.score * 100.0 / self.max_score

    def to_dict(self) -> dict[str, Any]:
        return {"subject": self.subject, "score": self.score, "maxScore": self.max_score, "term": self.term}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Grade":
        return cls(
            subject=str(raw["subject"]),
            score=raw["score"],
            term=int(raw["term"]),
            max_score=raw.get("maxScore", DEFAULT_MAX_SCORE),
        )


@dataclass(frozen=True)
class Student:
    """Domain entity: Student.

    Immutable snapshot; every change produces a new value via ``dataclasses.replace``.
    """

    id: str
    name: str
    grade_level: str
    section: str
    guardian_name: str
    guardian_email: str
    guardian_phone: str
    avatar: str = ""
    grades: tuple[Grade, ...] = ()
    attendance: Mapping[str, AttendanceStatus] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "attendance", freeze_attendance(self.attendance))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "gradeLevel": self.grade_level,
            "section": self.section,
            "avatar": self.avatar,
            "guardianName": self.guardian_name,
            "guardianEmail": self.guardian_email,
            "guardianPhone": self.guardian_phone,
            "grades": [g.to_dict() for g in self.grades],
            "attendance": encode_attendance(self.attendance),
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Student":
        return cls(
            id=str(raw["id"]),
            name=str(raw["name"]),
            grade_level=str(raw.get("gradeLevel", "")),
            section=str(raw.get("section", "")),
            avatar=str(raw.get("avatar", "")),
            guardian_name=str(raw.get("guardianName", "")),
            guardian_email=str(raw.get("guardianEmail", "")),
            guardian_phone=str(raw.get("guardianPhone", "")),
            grades=tuple(Grade.from_dict(g) for g in raw.get("grades", [])),
            attendance=decode_attendance(raw.get("attendance")),
        )
