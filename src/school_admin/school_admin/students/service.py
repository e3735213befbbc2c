from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Collection, Mapping, Optional

from ..attendance.marking import mark_entities
from ..common.validators import require_score, require_term
from ..core.constants import LOW_GRADE_THRESHOLD
from ..core.enums import AttendanceStatus
from ..store.store import SchoolStore
from .grades import upsert_grade
from .model import Student
from .queries import GradeRow, grade_table, search_students


@dataclass(frozen=True)
class PerformanceAlert:
    student_id: str
    student_name: str
    subject: str
    term: int
    score: float

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "studentName": self.student_name,
            "subject": self.subject,
            "term": self.term,
            "score": self.score,
        }


class StudentService:
    """Use cases: student directory, attendance marking and grade entry.

    Lookup misses degrade to no-ops (the method returns False) and never raise.
    """

    def __init__(self, store: SchoolStore, *, low_grade_threshold: float = LOW_GRADE_THRESHOLD):
        self._store = store
        self._threshold = low_grade_threshold

    def list_students(self, search: str = "") -> list[Student]:
        return search_students(self._store.state.students, search)

    def get_student(self, student_id: str) -> Optional[Student]:
        for s in self._store.state.students:
            if s.id == student_id:
                return s
        return None

    def add_student(self, student: Student) -> None:
        # id uniqueness is the caller's job
        self._store.replace(students=(student, *self._store.state.students))

    def update_student(self, student: Student) -> bool:
        students = self._store.state.students
        if not any(s.id == student.id for s in students):
            return False
        self._store.replace(students=tuple(student if s.id == student.id else s for s in students))
        return True

    def delete_student(self, student_id: str) -> bool:
        return self.bulk_delete_students([student_id]) > 0

    def bulk_delete_students(self, student_ids: Collection[str]) -> int:
        ids = set(student_ids)
        students = self._store.state.students
        kept = tuple(s for s in students if s.id not in ids)
        removed = len(students) - len(kept)
        if removed:
            self._store.replace(students=kept)
        return removed

    def set_attendance(self, student_id: str, status: AttendanceStatus, *, on: date) -> bool:
        return self.bulk_set_attendance([student_id], status, on=on)

    def bulk_set_attendance(self, student_ids: Collection[str], status: AttendanceStatus, *, on: date) -> bool:
        updated = mark_entities(self._store.state.students, student_ids, on=on, status=status)
        if updated is None:
            return False
        self._store.replace(students=updated)
        return True

    def upsert_grade(self, student_id: str, subject: str, term: int, score: float) -> bool:
        """Score range is validated by callers, not here."""

        students = self._store.state.students
        out = []
        found = False
        for s in students:
            if s.id == student_id:
                found = True
                s = replace(s, grades=upsert_grade(s.grades, subject=subject, term=term, score=score))
            out.append(s)
        if not found:
            return False
        self._store.replace(students=tuple(out))
        return True

    def record_scores(self, *, subject: str, term: int, scores: Mapping[str, object]) -> list[PerformanceAlert]:
        """Bulk grade entry for one subject/term.

        Validates every score first (0-100), then upserts them in order and
        returns an alert for each known student scoring below the threshold.
        """

        term = require_term(term)
        validated = {student_id: require_score(value) for student_id, value in scores.items()}

        alerts: list[PerformanceAlert] = []
        for student_id, score in validated.items():
            if not self.upsert_grade(student_id, subject, term, score):
                continue
            if score < self._threshold:
                student = self.get_student(student_id)
                alerts.append(
                    PerformanceAlert(
                        student_id=student_id,
                        student_name=student.name if student else student_id,
                        subject=subject,
                        term=term,
                        score=score,
                    )
                )
        return alerts

    def grade_table(self, *, subject: str, term: int) -> list[GradeRow]:
        return grade_table(self._store.state.students, subject=subject, term=term)
