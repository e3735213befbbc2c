from __future__ import annotations

import json
from datetime import date

import pytest

from src.school_admin.school_admin.core.constants import (
    SCHOOL_LOGO_KEY,
    STORAGE_KEYS,
    STUDENTS_KEY,
    TEACHERS_KEY,
)
from src.school_admin.school_admin.core.enums import AttendanceStatus
from src.school_admin.school_admin.core.exceptions import StorageError
from src.school_admin.school_admin.storage.memory_storage import InMemoryStorage
from src.school_admin.school_admin.store.seed import DEFAULT_STUDENTS, DEFAULT_TEACHERS, default_state
from src.school_admin.school_admin.store.store import SchoolStore
from src.school_admin.school_admin.students.service import StudentService


class FailingStorage:
    def __init__(self):
        self.attempts = 0

    def get(self, key):
        raise StorageError("medium unavailable")

    def put_many(self, entries):
        self.attempts += 1
        raise StorageError("quota exceeded")


def test_empty_storage_loads_seed_defaults(store):
    assert store.state == default_state()
    assert [s.id for s in store.state.students] == ["S001", "S002"]
    assert store.state.notification_logs == ()
    assert store.state.school_logo == ""


def test_unparseable_key_falls_back_on_its_own():
    custom_teachers = json.dumps([{"id": "T9", "name": "Ms. Ada", "department": "Science", "email": "ada@edu.com"}])
    storage = InMemoryStorage({STUDENTS_KEY: "{not json", TEACHERS_KEY: custom_teachers})

    store = SchoolStore(storage)

    assert store.state.students == DEFAULT_STUDENTS
    assert [t.id for t in store.state.teachers] == ["T9"]
    assert store.state.teachers != DEFAULT_TEACHERS


def test_logo_is_stored_raw_not_json(storage, store):
    store.replace(school_logo="data:image/png;base64,AAAA")

    assert storage.get(SCHOOL_LOGO_KEY) == "data:image/png;base64,AAAA"


def test_every_change_writes_a_full_snapshot(storage, store):
    assert storage.writes == 0

    StudentService(store).delete_student("S002")

    assert storage.writes == 1
    assert set(storage.as_dict()) == set(STORAGE_KEYS)
    assert [s["id"] for s in json.loads(storage.get(STUDENTS_KEY))] == ["S001"]


def test_no_op_mutation_does_not_write(storage, store):
    StudentService(store).delete_student("missing")

    assert storage.writes == 0
    assert store.is_syncing is False


def test_sync_flag_is_transient(store, clock):
    assert store.is_syncing is False

    store.replace(school_logo="logo")
    assert store.is_syncing is True

    clock.advance(0.5)
    assert store.is_syncing is True

    clock.advance(0.4)
    assert store.is_syncing is False


def test_storage_failures_are_swallowed():
    storage = FailingStorage()
    store = SchoolStore(storage)

    assert store.state == default_state()

    StudentService(store).set_attendance("S001", AttendanceStatus.LATE, on=date(2026, 2, 2))

    assert storage.attempts == 1
    assert store.state.students[0].attendance["2026-02-02"] == AttendanceStatus.LATE


def test_listeners_receive_new_state_and_failures_are_isolated(store):
    seen = []

    def broken(_state):
        raise RuntimeError("boom")

    store.subscribe(broken)
    unsubscribe = store.subscribe(seen.append)

    store.replace(school_logo="a")
    assert len(seen) == 1
    assert seen[0].school_logo == "a"

    unsubscribe()
    store.replace(school_logo="b")
    assert len(seen) == 1


def test_snapshot_restore_round_trip(store):
    service = StudentService(store)
    service.upsert_grade("S002", "History", 2, 64)
    store.replace(school_logo="logo-data")

    restored = SchoolStore(InMemoryStorage(store.snapshot()))

    assert restored.state == store.state
    assert [s.id for s in restored.state.students] == [s.id for s in store.state.students]
    assert restored.state.students[1].grades == store.state.students[1].grades


def test_non_object_attendance_falls_back_to_defaults():
    bad_students = json.dumps([{"id": "S9", "name": "X", "attendance": ["2026-01-01"]}])
    bad_teachers = json.dumps([{"id": "T9", "name": "Y", "attendance": "PRESENT"}])

    store = SchoolStore(InMemoryStorage({STUDENTS_KEY: bad_students, TEACHERS_KEY: bad_teachers}))

    assert store.state.students == DEFAULT_STUDENTS
    assert store.state.teachers == DEFAULT_TEACHERS


def test_stored_attendance_cannot_be_edited_in_place(store):
    student = store.state.students[0]

    with pytest.raises(TypeError):
        student.attendance["2026-02-02"] = AttendanceStatus.ABSENT

    assert "2026-02-02" not in store.state.students[0].attendance
