from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from ..communications.model import CommunicationTemplate, NotificationLog
from ..core.constants import (
    EVENTS_KEY,
    NOTIFICATION_LOGS_KEY,
    REPORT_SETTINGS_KEY,
    SCHOOL_LOGO_KEY,
    STUDENTS_KEY,
    TEACHERS_KEY,
    TEMPLATES_KEY,
)
from ..events.model import SchoolEvent
from ..reports.model import ReportSettings
from ..students.model import Student
from ..teachers.model import Teacher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchoolState:
    """Aggregate of the seven persisted collections/records.

    The store swaps the whole value on every mutation, so two states can be
    compared by identity to detect a change.
    """

    students: tuple[Student, ...] = ()
    teachers: tuple[Teacher, ...] = ()
    events: tuple[SchoolEvent, ...] = ()
    notification_logs: tuple[NotificationLog, ...] = ()
    templates: tuple[CommunicationTemplate, ...] = ()
    report_settings: ReportSettings = field(default_factory=ReportSettings)
    school_logo: str = ""


def _dump_list(items) -> str:
    return json.dumps([item.to_dict() for item in items])


def encode_state(state: SchoolState) -> dict[str, str]:
    """Serialize every entry to its storage string (logo is stored raw, not JSON)."""

    return {
        STUDENTS_KEY: _dump_list(state.students),
        TEACHERS_KEY: _dump_list(state.teachers),
        EVENTS_KEY: _dump_list(state.events),
        NOTIFICATION_LOGS_KEY: _dump_list(state.notification_logs),
        TEMPLATES_KEY: _dump_list(state.templates),
        REPORT_SETTINGS_KEY: json.dumps(state.report_settings.to_dict()),
        SCHOOL_LOGO_KEY: state.school_logo,
    }


def _load_list(raw: str, parse: Callable[[Mapping], object]) -> tuple:
    data = json.loads(raw)
    if not isinstance(data, list):
        raise TypeError(f"expected a JSON list, got {type(data).__name__}")
    return tuple(parse(item) for item in data)


def _load_settings(raw: str) -> ReportSettings:
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return ReportSettings.from_dict(data)


_DECODERS: dict[str, tuple[str, Callable[[str], object]]] = {
    STUDENTS_KEY: ("students", lambda raw: _load_list(raw, Student.from_dict)),
    TEACHERS_KEY: ("teachers", lambda raw: _load_list(raw, Teacher.from_dict)),
    EVENTS_KEY: ("events", lambda raw: _load_list(raw, SchoolEvent.from_dict)),
    NOTIFICATION_LOGS_KEY: ("notification_logs", lambda raw: _load_list(raw, NotificationLog.from_dict)),
    TEMPLATES_KEY: ("templates", lambda raw: _load_list(raw, CommunicationTemplate.from_dict)),
    REPORT_SETTINGS_KEY: ("report_settings", _load_settings),
}


def decode_state(raw: Mapping[str, Optional[str]], *, defaults: SchoolState) -> SchoolState:
    """Rebuild a state from stored strings.

    Each key falls back to its value in ``defaults`` on its own when it is
    absent or cannot be parsed; the other keys still load.
    """

    fields: dict[str, object] = {}
    for key, (attr, decode) in _DECODERS.items():
        value = raw.get(key)
        if not value:
            fields[attr] = getattr(defaults, attr)
            continue
        try:
            fields[attr] = decode(value)
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.warning("Stored value for %s is unreadable (%s); using default", key, e)
            fields[attr] = getattr(defaults, attr)

    logo = raw.get(SCHOOL_LOGO_KEY)
    fields["school_logo"] = logo if logo is not None else defaults.school_logo
    return SchoolState(**fields)
