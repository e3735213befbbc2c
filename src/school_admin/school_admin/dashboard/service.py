from __future__ import annotations

from dataclasses import dataclass

from ..attendance.calculator import average_rate
from ..communications.queries import count_by_status
from ..store.state import SchoolState
from ..store.store import SchoolStore


@dataclass(frozen=True)
class DashboardSummary:
    student_count: int
    teacher_count: int
    event_count: int
    average_student_attendance: int
    average_teacher_attendance: int
    notifications_by_status: dict

    def to_dict(self) -> dict:
        return {
            "studentCount": self.student_count,
            "teacherCount": self.teacher_count,
            "eventCount": self.event_count,
            "averageStudentAttendance": self.average_student_attendance,
            "averageTeacherAttendance": self.average_teacher_attendance,
            "notificationsByStatus": dict(self.notifications_by_status),
        }


def dashboard_summary(state: SchoolState) -> DashboardSummary:
    return DashboardSummary(
        student_count=len(state.students),
        teacher_count=len(state.teachers),
        event_count=len(state.events),
        average_student_attendance=average_rate(s.attendance for s in state.students),
        average_teacher_attendance=average_rate(t.attendance for t in state.teachers),
        notifications_by_status=count_by_status(state.notification_logs),
    )


class DashboardService:
    def __init__(self, store: SchoolStore):
        self._store = store

    def summary(self) -> DashboardSummary:
        return dashboard_summary(self._store.state)

    @property
    def is_syncing(self) -> bool:
        return self._store.is_syncing
