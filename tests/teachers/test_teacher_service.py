from __future__ import annotations

from dataclasses import replace

import pytest

from src.school_admin.school_admin.core.enums import AttendanceStatus
from src.school_admin.school_admin.teachers.model import Teacher
from src.school_admin.school_admin.teachers.service import TeacherService


@pytest.fixture
def service(store) -> TeacherService:
    return TeacherService(store)


def test_update_teacher_replaces_matching_id(service):
    current = service.get_teacher("T001")

    assert service.update_teacher(replace(current, department="Physics")) is True
    assert service.get_teacher("T001").department == "Physics"
    assert service.get_teacher("T001").attendance == current.attendance


def test_update_unknown_teacher_is_a_no_op(service, store):
    before = store.state
    ghost = Teacher(id="T404", name="Nobody", department="None", email="nobody@edu.com")

    assert service.update_teacher(ghost) is False
    assert store.state is before


def test_add_and_bulk_delete(service):
    service.add_teacher(Teacher(id="T002", name="Ms. Grace Hopper", department="Computing", email="grace@edu.com"))
    assert [t.id for t in service.list_teachers()] == ["T002", "T001"]

    assert service.bulk_delete_teachers(["T002", "T001", "T003"]) == 2
    assert service.list_teachers() == []


def test_teacher_attendance(service, fixed_today):
    assert service.set_attendance("T001", AttendanceStatus.LATE, on=fixed_today) is True
    assert service.get_teacher("T001").attendance[fixed_today.isoformat()] == AttendanceStatus.LATE
    assert service.get_teacher("T001").attendance["2026-02-01"] == AttendanceStatus.PRESENT

    assert service.bulk_set_attendance(["T404"], AttendanceStatus.ABSENT, on=fixed_today) is False


def test_search_by_name_or_department(service):
    assert [t.id for t in service.list_teachers("MATHEMATICS")] == ["T001"]
    assert [t.id for t in service.list_teachers("smith")] == ["T001"]
    assert service.list_teachers("history") == []
