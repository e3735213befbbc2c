from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Portal mode: admins manage data, guardians only read their ward's report."""

    ADMIN = "admin"
    GUARDIAN = "guardian"


class AttendanceStatus(str, Enum):
    """One value per (entity, calendar date)."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"


class NotificationCategory(str, Enum):
    ACADEMIC = "ACADEMIC"
    EVENT = "EVENT"
    EMERGENCY = "EMERGENCY"
    FEE = "FEE"
    GENERAL = "GENERAL"


class DeliveryStatus(str, Enum):
    """Delivery outcome recorded on a notification log entry."""

    SENT = "SENT"
    FAILED = "FAILED"
    QUEUED = "QUEUED"
