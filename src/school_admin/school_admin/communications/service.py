from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import iso_timestamp, now_utc
from ..core.enums import NotificationCategory
from ..store.store import SchoolStore
from ..students.model import Student
from .mail_relay import MailRelay
from .model import CommunicationTemplate, NotificationLog
from .queries import search_logs

logger = logging.getLogger(__name__)

STUDENT_PLACEHOLDER = "[StudentName]"
GUARDIAN_PLACEHOLDER = "[GuardianName]"


def _new_log_id() -> str:
    return uuid.uuid4().hex[:12]


def render_placeholders(text: str, student: Student) -> str:
    return text.replace(STUDENT_PLACEHOLDER, student.name).replace(GUARDIAN_PLACEHOLDER, student.guardian_name)


class CommunicationService:
    """Use cases: guardian messaging, templates and the notification audit log.

    Every relay outcome, success or failure, becomes exactly one log entry.
    Bulk sends are sequential: each recipient's entry is appended before the
    next message goes out, so log order follows send order.
    """

    def __init__(
        self,
        store: SchoolStore,
        relay: MailRelay,
        *,
        clock: Callable[[], datetime] = now_utc,
        id_factory: Callable[[], str] = _new_log_id,
    ):
        self._store = store
        self._relay = relay
        self._clock = clock
        self._new_id = id_factory

    # Audit log
    def list_logs(self, search: str = "") -> list[NotificationLog]:
        return search_logs(self._store.state.notification_logs, search)

    def append_log(self, log: NotificationLog) -> None:
        self._store.replace(notification_logs=(log, *self._store.state.notification_logs))

    # Templates
    def list_templates(self) -> list[CommunicationTemplate]:
        return list(self._store.state.templates)

    def replace_templates(self, templates: Iterable[CommunicationTemplate]) -> None:
        self._store.replace(templates=tuple(templates))

    def render_template(self, template: CommunicationTemplate, student: Student) -> tuple[str, str]:
        return render_placeholders(template.subject, student), render_placeholders(template.content, student)

    # Sending
    def _targets(self, student_id: Optional[str]) -> Sequence[Student]:
        students = self._store.state.students
        if student_id is None:
            return students
        return tuple(s for s in students if s.id == student_id)

    def _dispatch(self, student: Student, subject: str, body: str, category: NotificationCategory) -> NotificationLog:
        result = self._relay.send(student.guardian_email, subject, body, category)
        log = NotificationLog(
            id=self._new_id(),
            timestamp=iso_timestamp(self._clock()),
            recipient_email=result.recipient,
            student_name=student.name,
            subject=result.subject,
            type=result.category,
            status=result.status,
        )
        self.append_log(log)
        return log

    def send_message(
        self,
        *,
        subject: str,
        body: str,
        category: NotificationCategory = NotificationCategory.GENERAL,
        student_id: Optional[str] = None,
    ) -> list[NotificationLog]:
        """Send to one student's guardian, or to every guardian when ``student_id`` is None.

        Placeholders are substituted per recipient. An unknown ``student_id``
        sends nothing.
        """

        logs = []
        for student in self._targets(student_id):
            logs.append(
                self._dispatch(
                    student,
                    render_placeholders(subject, student),
                    render_placeholders(body, student),
                    category,
                )
            )
        logger.info("Message batch finished: %d sent/attempted", len(logs))
        return logs

    def send_template(self, template_id: str, *, student_id: Optional[str] = None) -> list[NotificationLog]:
        template = next((t for t in self._store.state.templates if t.id == template_id), None)
        if template is None:
            return []
        return self.send_message(
            subject=template.subject,
            body=template.content,
            category=template.category,
            student_id=student_id,
        )

    def send_report_card(self, student_id: str, *, term: int, body: str = "") -> Optional[NotificationLog]:
        student = next(iter(self._targets(student_id)), None)
        if student is None:
            return None
        subject = f"Term {term} Report: {student.name}"
        return self._dispatch(student, subject, body or subject, NotificationCategory.ACADEMIC)

    def notify_low_grade(self, student_id: str, *, subject_name: str, score: Optional[float] = None) -> Optional[NotificationLog]:
        student = next(iter(self._targets(student_id)), None)
        if student is None:
            return None
        subject = f"Performance Alert: {subject_name}"
        body = f"Dear {student.guardian_name}, {student.name} needs additional support in {subject_name}."
        if score is not None:
            body += f" Latest score: {score}%."
        return self._dispatch(student, subject, body, NotificationCategory.ACADEMIC)
