"""Built-in default data used when durable storage has no value for a key."""

from __future__ import annotations

from ..communications.model import CommunicationTemplate
from ..core.enums import AttendanceStatus, NotificationCategory
from ..events.model import SchoolEvent
from ..reports.model import ReportSettings
from ..students.model import Grade, Student
from ..teachers.model import Teacher
from .state import SchoolState

DEFAULT_STUDENTS = (
    Student(
        id="S001",
        name="Alex Johnson",
        grade_level="Grade 10",
        section="A",
        avatar="https://picsum.photos/seed/alex/100/100",
        guardian_name="Mark Johnson",
        guardian_email="johnson.parent@example.com",
        guardian_phone="+1-555-0101",
        grades=(
            Grade(subject="Mathematics", score=88, term=1),
            Grade(subject="Science", score=92, term=1),
            Grade(subject="English", score=85, term=1),
        ),
        attendance={"2023-10-01": AttendanceStatus.PRESENT, "2023-10-02": AttendanceStatus.PRESENT},
    ),
    Student(
        id="S002",
        name="Sarah Williams",
        grade_level="Grade 10",
        section="B",
        avatar="https://picsum.photos/seed/sarah/100/100",
        guardian_name="Linda Williams",
        guardian_email="williams.parent@example.com",
        guardian_phone="+1-555-0102",
        grades=(
            Grade(subject="Mathematics", score=75, term=1),
            Grade(subject="English", score=92, term=1),
        ),
        attendance={"2023-10-01": AttendanceStatus.PRESENT, "2023-10-02": AttendanceStatus.ABSENT},
    ),
)

DEFAULT_TEACHERS = (
    Teacher(
        id="T001",
        name="Dr. Robert Smith",
        department="Mathematics",
        email="robert.smith@edu.com",
        avatar="https://picsum.photos/seed/robert/100/100",
        attendance={"2026-02-01": AttendanceStatus.PRESENT},
    ),
)

DEFAULT_EVENTS = (
    SchoolEvent(
        id="1",
        date="2024-10-24",
        time="09:00",
        title="Mid-Term Examinations",
        location="CCIS Hall",
        description="Mandatory exams for all grades.",
        color="text-indigo-600",
        bg="bg-indigo-50",
    ),
    SchoolEvent(
        id="2",
        date="2024-11-02",
        time="14:00",
        title="Parent-Teacher Meeting",
        location="Main Auditorium",
        description="Review student performance with faculty.",
        color="text-purple-600",
        bg="bg-purple-50",
    ),
    SchoolEvent(
        id="3",
        date="2024-11-15",
        time="10:00",
        title="Science Exhibition",
        location="Lab Block B",
        description="Showcasing student scientific projects.",
        color="text-emerald-600",
        bg="bg-emerald-50",
    ),
)

DEFAULT_TEMPLATES = (
    CommunicationTemplate(
        id="temp-1",
        name="General Announcement",
        subject="Important School Update - CCIS",
        category=NotificationCategory.GENERAL,
        content="Dear Parents/Guardians, we have a scheduled update regarding...",
    ),
    CommunicationTemplate(
        id="temp-2",
        name="Fee Notice",
        subject="Outstanding Balance Notification",
        category=NotificationCategory.FEE,
        content="Dear [GuardianName], this is a reminder regarding the outstanding fees for [StudentName]...",
    ),
    CommunicationTemplate(
        id="temp-3",
        name="Emergency Alert",
        subject="URGENT: School Closure Notice",
        category=NotificationCategory.EMERGENCY,
        content="Please be advised that Cedar Crest International School will be closed tomorrow due to...",
    ),
)

DEFAULT_REPORT_SETTINGS = ReportSettings(head_of_school="S. Thompson", signature="", auth_prefix="ES-2024-TR")


def default_state() -> SchoolState:
    return SchoolState(
        students=DEFAULT_STUDENTS,
        teachers=DEFAULT_TEACHERS,
        events=DEFAULT_EVENTS,
        notification_logs=(),
        templates=DEFAULT_TEMPLATES,
        report_settings=DEFAULT_REPORT_SETTINGS,
        school_logo="",
    )
