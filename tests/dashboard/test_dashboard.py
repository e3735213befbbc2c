from src.school_admin.school_admin.communications.model import NotificationLog
from src.school_admin.school_admin.core.enums import DeliveryStatus, NotificationCategory
from src.school_admin.school_admin.dashboard.service import DashboardService, dashboard_summary
from src.school_admin.school_admin.store.seed import default_state


def _log(log_id: str, status: DeliveryStatus) -> NotificationLog:
    return NotificationLog(
        id=log_id,
        timestamp="2026-02-02T08:30:00.000Z",
        recipient_email="johnson.parent@example.com",
        student_name="Alex Johnson",
        subject="Update",
        type=NotificationCategory.GENERAL,
        status=status,
    )


def test_summary_of_seed_state():
    summary = dashboard_summary(default_state())

    assert (summary.student_count, summary.teacher_count, summary.event_count) == (2, 1, 3)
    assert summary.average_student_attendance == 75
    assert summary.average_teacher_attendance == 100
    assert summary.notifications_by_status == {"SENT": 0, "FAILED": 0, "QUEUED": 0}


def test_summary_counts_logs_by_status(store):
    store.replace(
        notification_logs=(
            _log("3", DeliveryStatus.FAILED),
            _log("2", DeliveryStatus.SENT),
            _log("1", DeliveryStatus.SENT),
        )
    )

    body = DashboardService(store).summary().to_dict()

    assert body["notificationsByStatus"] == {"SENT": 2, "FAILED": 1, "QUEUED": 0}
    assert body["averageStudentAttendance"] == 75
