"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the use cases live in the services.
"""

from datetime import date

from src.school_admin.school_admin.container import build_container
from src.school_admin.school_admin.core.enums import AttendanceStatus, NotificationCategory
from src.school_admin.school_admin.storage.memory_storage import InMemoryStorage


def main():
    container = build_container(storage=InMemoryStorage())

    container.student_service.upsert_grade("S001", "Mathematics", 1, 95)
    container.student_service.bulk_set_attendance(["S001", "S002"], AttendanceStatus.PRESENT, on=date.today())
    container.communication_service.send_message(
        subject="Term update for [StudentName]",
        body="Dear guardian, [StudentName]'s term 1 results are available.",
        category=NotificationCategory.ACADEMIC,
    )

    card = container.report_service.report_card("S001", term=1, year=date.today().year)
    print(card.to_dict())
    print(container.dashboard_service.summary().to_dict())


if __name__ == "__main__":
    main()
