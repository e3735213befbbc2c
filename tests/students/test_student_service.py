from __future__ import annotations

from datetime import date

import pytest

from src.school_admin.school_admin.core.enums import AttendanceStatus
from src.school_admin.school_admin.core.exceptions import ValidationError
from src.school_admin.school_admin.students.model import Student
from src.school_admin.school_admin.students.service import StudentService


@pytest.fixture
def service(store) -> StudentService:
    return StudentService(store)


def _student(student_id: str, name: str = "New Kid") -> Student:
    return Student(
        id=student_id,
        name=name,
        grade_level="Grade 9",
        section="C",
        guardian_name="Guardian",
        guardian_email="guardian@example.com",
        guardian_phone="+1-555-0199",
    )


def _maths_term1(student: Student):
    return [g for g in student.grades if g.subject == "Mathematics" and g.term == 1]


def test_upsert_grade_keeps_one_grade_per_subject_and_term(service):
    service.upsert_grade("S001", "Mathematics", 1, 88)
    service.upsert_grade("S001", "Mathematics", 1, 95)

    grades = _maths_term1(service.get_student("S001"))
    assert len(grades) == 1
    assert grades[0].score == 95


def test_upsert_grade_appends_new_pair_with_default_max(service):
    before = len(service.get_student("S002").grades)

    service.upsert_grade("S002", "Science", 2, 71)

    student = service.get_student("S002")
    assert len(student.grades) == before + 1
    assert student.grades[-1].subject == "Science"
    assert student.grades[-1].term == 2
    assert student.grades[-1].max_score == 100


def test_upsert_grade_for_unknown_student_is_a_no_op(service, store):
    before = store.state

    assert service.upsert_grade("S999", "Mathematics", 1, 50) is False
    assert store.state is before


def test_mutations_replace_entities_instead_of_editing(service):
    original = service.get_student("S001")

    service.upsert_grade("S001", "English", 1, 99)

    assert service.get_student("S001") is not original
    assert [g.score for g in original.grades if g.subject == "English"] == [85]


def test_attendance_overwrites_same_date_only(service, fixed_today):
    service.set_attendance("S001", AttendanceStatus.ABSENT, on=fixed_today)
    service.set_attendance("S001", AttendanceStatus.LATE, on=fixed_today)

    attendance = service.get_student("S001").attendance
    assert attendance[fixed_today.isoformat()] == AttendanceStatus.LATE
    assert attendance["2023-10-01"] == AttendanceStatus.PRESENT
    assert len(attendance) == 3


def test_attendance_write_is_idempotent(service, fixed_today):
    service.set_attendance("S002", AttendanceStatus.PRESENT, on=fixed_today)
    first = service.get_student("S002")
    service.set_attendance("S002", AttendanceStatus.PRESENT, on=fixed_today)

    assert service.get_student("S002") == first


def test_bulk_attendance_marks_every_id_on_the_same_date(service, fixed_today):
    assert service.bulk_set_attendance(["S002", "S001", "S404"], AttendanceStatus.PRESENT, on=fixed_today)

    for student_id in ("S001", "S002"):
        assert service.get_student(student_id).attendance[fixed_today.isoformat()] == AttendanceStatus.PRESENT


def test_add_student_prepends(service):
    service.add_student(_student("S100"))

    assert [s.id for s in service.list_students()] == ["S100", "S001", "S002"]


def test_delete_absent_id_leaves_collection_unchanged(service, store):
    before = store.state.students

    assert service.delete_student("nope") is False
    assert store.state.students == before
    assert len(store.state.students) == len(before)


def test_bulk_delete_ignores_unknown_ids(service):
    removed = service.bulk_delete_students(["S001", "ghost"])

    assert removed == 1
    assert [s.id for s in service.list_students()] == ["S002"]


def test_update_student_replaces_by_id(service):
    updated = _student("S002", name="Sarah W.")

    assert service.update_student(updated) is True
    assert service.get_student("S002").name == "Sarah W."
    assert service.update_student(_student("S777")) is False


def test_search_matches_name_or_id_case_insensitively(service):
    assert [s.id for s in service.list_students("alex")] == ["S001"]
    assert [s.id for s in service.list_students("s002")] == ["S002"]
    assert len(service.list_students("")) == 2


def test_grade_table_defaults_missing_grades(service):
    rows = {r.student_id: r for r in service.grade_table(subject="Science", term=1)}

    assert rows["S001"].current_score == 92
    assert rows["S002"].current_score == 0
    assert rows["S002"].max_score == 100


def test_record_scores_returns_alerts_below_threshold(service):
    alerts = service.record_scores(subject="History", term=1, scores={"S001": 59, "S002": "80", "S404": 10})

    assert [(a.student_id, a.score) for a in alerts] == [("S001", 59)]
    assert alerts[0].student_name == "Alex Johnson"
    assert [g.score for g in service.get_student("S002").grades if g.subject == "History"] == [80]


def test_record_scores_validates_before_writing(service, store):
    before = store.state

    with pytest.raises(ValidationError):
        service.record_scores(subject="History", term=1, scores={"S001": 70, "S002": 101})

    with pytest.raises(ValidationError):
        service.record_scores(subject="History", term=4, scores={"S001": 70})

    assert store.state is before
