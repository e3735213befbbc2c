from __future__ import annotations

from datetime import date
from typing import Collection, Optional

from ..attendance.marking import mark_entities
from ..core.enums import AttendanceStatus
from ..store.store import SchoolStore
from .model import Teacher
from .queries import search_teachers


class TeacherService:
    """Use cases: teacher directory and staff attendance."""

    def __init__(self, store: SchoolStore):
        self._store = store

    def list_teachers(self, search: str = "") -> list[Teacher]:
        return search_teachers(self._store.state.teachers, search)

    def get_teacher(self, teacher_id: str) -> Optional[Teacher]:
        return next((t for t in self._store.state.teachers if t.id == teacher_id), None)

    def add_teacher(self, teacher: Teacher) -> None:
        self._store.replace(teachers=(teacher, *self._store.state.teachers))

    def update_teacher(self, teacher: Teacher) -> bool:
        teachers = self._store.state.teachers
        if not any(t.id == teacher.id for t in teachers):
            return False
        self._store.replace(teachers=tuple(teacher if t.id == teacher.id else t for t in teachers))
        return True

    def delete_teacher(self, teacher_id: str) -> bool:
        return self.bulk_delete_teachers([teacher_id]) > 0

    def bulk_delete_teachers(self, teacher_ids: Collection[str]) -> int:
        ids = set(teacher_ids)
        teachers = self._store.state.teachers
        kept = tuple(t for t in teachers if t.id not in ids)
        removed = len(teachers) - len(kept)
        if removed:
            self._store.replace(teachers=kept)
        return removed

    def set_attendance(self, teacher_id: str, status: AttendanceStatus, *, on: date) -> bool:
        return self.bulk_set_attendance([teacher_id], status, on=on)

    def bulk_set_attendance(self, teacher_ids: Collection[str], status: AttendanceStatus, *, on: date) -> bool:
        updated = mark_entities(self._store.state.teachers, teacher_ids, on=on, status=status)
        if updated is None:
            return False
        self._store.replace(teachers=updated)
        return True
