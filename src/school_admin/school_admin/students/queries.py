"""Read-only projections over the student collection (recomputed on every read)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..core.constants import DEFAULT_MAX_SCORE
from .grades import find_grade
from .model import Student


@dataclass(frozen=True)
class GradeRow:
    student_id: str
    name: str
    avatar: str
    grade_level: str
    current_score: float
    max_score: float

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "name": self.name,
            "avatar": self.avatar,
            "gradeLevel": self.grade_level,
            "currentScore": self.current_score,
            "maxScore": self.max_score,
        }


def search_students(students: Sequence[Student], text: str) -> list[Student]:
    needle = (text or "").strip().lower()
    if not needle:
        return list(students)
    return [s for s in students if needle in s.name.lower() or needle in s.id.lower()]


def grade_table(students: Sequence[Student], *, subject: str, term: int) -> list[GradeRow]:
    rows = []
    for s in students:
        g = find_grade(s.grades, subject, term)
        rows.append(
            GradeRow(
                student_id=s.id,
                name=s.name,
                avatar=s.avatar,
                grade_level=s.grade_level,
                current_score=g.score if g else 0,
                max_score=g.max_score if g else DEFAULT_MAX_SCORE,
            )
        )
    return rows
