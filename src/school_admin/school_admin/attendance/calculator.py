from __future__ import annotations

from typing import Iterable

from ..core.enums import AttendanceStatus
from .marking import Attendance


def present_days(attendance: Attendance) -> int:
    return sum(1 for status in attendance.values() if status == AttendanceStatus.PRESENT)


def attendance_rate(attendance: Attendance) -> int:
    """Present days / recorded days as a whole percent, rounded half up.

    Defined as 100 when no day has been recorded yet.
    """

    total = len(attendance)
    if total == 0:
        return 100
    return (present_days(attendance) * 200 + total) // (2 * total)


def average_rate(attendances: Iterable[Attendance]) -> int:
    rates = [attendance_rate(a) for a in attendances]
    if not rates:
        return 100
    return (sum(rates) * 2 + len(rates)) // (2 * len(rates))
