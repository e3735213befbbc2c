from __future__ import annotations

from ..attendance.calculator import attendance_rate, present_days
from ..core.constants import DEFAULT_SCHOOL_CODE, DEFAULT_SCHOOL_NAME
from ..events.model import SchoolEvent
from ..students.model import Student

GENERIC_FALLBACK = (
    "The student has demonstrated a positive attitude toward learning. "
    "We look forward to their continued progress in the next term."
)

REPORT_COMMENT_FALLBACK = (
    "The student is making steady progress across the curriculum. Continued focus on subject "
    "fundamentals and consistent attendance is recommended for future academic success."
)


def grades_summary(student: Student) -> str:
    if not student.grades:
        return "No grades recorded for this term."
    return ", ".join(f"{g.subject} ({g.score:g}/{g.max_score:g})" for g in student.grades)


def report_comment_prompt(student: Student, *, school_name: str = DEFAULT_SCHOOL_NAME) -> str:
    present = present_days(student.attendance)
    total = len(student.attendance)
    rate = attendance_rate(student.attendance)
    return f"""
As a professional school principal at {school_name}, write a concise (2-4 sentences) terminal report comment for the student: {student.name}.

Analyze the following data to provide a nuanced and personalized comment:
- Academic Performance: {grades_summary(student)}
- Attendance: {present} days present out of {total} ({rate}% attendance rate).

Guidelines:
1. Mention the attendance rate. If it's excellent (>=95%), praise their commitment. If it's concerning (<90%), gently emphasize the importance of regular attendance for academic success.
2. Explicitly identify their strongest subject(s) based on the scores provided.
3. Identify any subjects where there is room for growth or more focus needed.
4. Use a tone that is professional, encouraging, and specific. Avoid generic "well done" statements.

Response should be a single paragraph.
""".strip()


def event_email_prompt(
    event: SchoolEvent,
    *,
    school_name: str = DEFAULT_SCHOOL_NAME,
    school_code: str = DEFAULT_SCHOOL_CODE,
) -> str:
    return f"""
As the Administrative Office of {school_name}, draft a professional and inviting email to student guardians about an upcoming event.

Event Details:
- Title: {event.title}
- Date: {event.date}
- Time: {event.time}
- Location: {event.location}
- Description: {event.description}

Guidelines:
1. Start with a professional greeting.
2. Clearly state the purpose of the event.
3. Encourage attendance and explain why it is important for the school community.
4. Provide the logistics clearly.
5. End with a professional sign-off from "{school_code} Administration".

Keep the email concise and suitable for a school setting.
""".strip()


def event_email_fallback(event: SchoolEvent, *, school_code: str = DEFAULT_SCHOOL_CODE) -> str:
    return (
        "Dear Guardians,\n\n"
        f"We invite you to our upcoming event: {event.title}.\n\n"
        f"Date: {event.date}\nTime: {event.time}\nLocation: {event.location}\n\n"
        "We look forward to seeing you there.\n\n"
        f"Best regards,\n{school_code} Administration"
    )
