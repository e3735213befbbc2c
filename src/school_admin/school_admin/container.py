from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .communications.mail_relay import MailRelay, SimulatedMailRelay
from .communications.service import CommunicationService
from .core.constants import (
    DEFAULT_DRAFT_TIMEOUT_SECONDS,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_MAIL_FAILURE_RATE,
    DEFAULT_MAIL_LATENCY_SECONDS,
    DEFAULT_SCHOOL_CODE,
    DEFAULT_SCHOOL_NAME,
    DEFAULT_SYNC_WINDOW_SECONDS,
)
from .dashboard.service import DashboardService
from .drafting.client import GeminiTextDrafter, TextDrafter
from .drafting.service import DraftingService
from .events.service import EventService
from .reports.service import ReportService
from .storage.factory import build_storage
from .storage.repository import KeyValueStorage
from .store.store import SchoolStore
from .students.service import StudentService
from .teachers.service import TeacherService


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage
    store: SchoolStore

    mail_relay: MailRelay
    drafter: Optional[TextDrafter]

    student_service: StudentService
    teacher_service: TeacherService
    event_service: EventService
    communication_service: CommunicationService
    drafting_service: DraftingService
    report_service: ReportService
    dashboard_service: DashboardService


def build_container(
    *,
    storage: KeyValueStorage,
    mail_relay: Optional[MailRelay] = None,
    drafter: Optional[TextDrafter] = None,
    sync_window_seconds: float = DEFAULT_SYNC_WINDOW_SECONDS,
    school_name: str = DEFAULT_SCHOOL_NAME,
    school_code: str = DEFAULT_SCHOOL_CODE,
) -> Container:
    store = SchoolStore(storage, sync_window_seconds=sync_window_seconds)
    relay = mail_relay or SimulatedMailRelay()

    return Container(
        storage=storage,
        store=store,
        mail_relay=relay,
        drafter=drafter,
        student_service=StudentService(store),
        teacher_service=TeacherService(store),
        event_service=EventService(store),
        communication_service=CommunicationService(store, relay),
        drafting_service=DraftingService(drafter, school_name=school_name, school_code=school_code),
        report_service=ReportService(store, school_code=school_code),
        dashboard_service=DashboardService(store),
    )


def build_container_from_settings(settings) -> Container:
    """Wire everything from a settings module (see ``config``)."""

    storage = build_storage(
        getattr(settings, "STORAGE_BACKEND", "file"),
        storage_dir=getattr(settings, "STORAGE_DIR", "data"),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    relay = SimulatedMailRelay(
        failure_rate=float(getattr(settings, "MAIL_FAILURE_RATE", DEFAULT_MAIL_FAILURE_RATE)),
        latency_seconds=float(getattr(settings, "MAIL_LATENCY_SECONDS", DEFAULT_MAIL_LATENCY_SECONDS)),
    )
    drafter = GeminiTextDrafter(
        api_key=getattr(settings, "GEMINI_API_KEY", ""),
        model=getattr(settings, "GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        timeout=float(getattr(settings, "DRAFT_TIMEOUT_SECONDS", DEFAULT_DRAFT_TIMEOUT_SECONDS)),
    )
    return build_container(
        storage=storage,
        mail_relay=relay,
        drafter=drafter,
        sync_window_seconds=float(getattr(settings, "SYNC_WINDOW_SECONDS", DEFAULT_SYNC_WINDOW_SECONDS)),
        school_name=getattr(settings, "SCHOOL_NAME", DEFAULT_SCHOOL_NAME),
        school_code=getattr(settings, "SCHOOL_CODE", DEFAULT_SCHOOL_CODE),
    )
