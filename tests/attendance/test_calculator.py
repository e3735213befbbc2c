from src.school_admin.school_admin.attendance.calculator import attendance_rate, average_rate, present_days
from src.school_admin.school_admin.core.enums import AttendanceStatus

P, A, L = AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.LATE


def _days(*statuses):
    return {f"2026-01-{i + 1:02d}": s for i, s in enumerate(statuses)}


def test_no_recorded_days_is_full_attendance():
    assert attendance_rate({}) == 100


def test_late_days_are_not_present():
    attendance = _days(P, L, A)

    assert present_days(attendance) == 1
    assert attendance_rate(attendance) == 33


def test_rate_rounds_half_up():
    assert attendance_rate(_days(P, A, A, A, A, A, A, A)) == 13
    assert attendance_rate(_days(P, P, A)) == 67
    assert attendance_rate(_days(P, P, P, P, P, A, A, A)) == 63
    assert attendance_rate(_days(P, A)) == 50


def test_average_rate():
    assert average_rate([]) == 100
    assert average_rate([_days(P, P), _days(P, A)]) == 75
    assert average_rate([_days(P, P, A), {}]) == 84
