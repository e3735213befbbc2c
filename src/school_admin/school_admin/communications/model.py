from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import DeliveryStatus, NotificationCategory


@dataclass(frozen=True)
class NotificationLog:
    """Audit entry for one guardian message. Never edited once written."""

    id: str
    timestamp: str
    recipient_email: str
    student_name: str
    subject: str
    type: NotificationCategory
    status: DeliveryStatus

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "recipientEmail": self.recipient_email,
            "studentName": self.student_name,
            "subject": self.subject,
            "type": self.type.value,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "NotificationLog":
        return cls(
            id=str(raw["id"]),
            timestamp=str(raw["timestamp"]),
            recipient_email=str(raw.get("recipientEmail", "")),
            student_name=str(raw.get("studentName", "")),
            subject=str(raw.get("subject", "")),
            type=NotificationCategory(raw.get("type", NotificationCategory.GENERAL.value)),
            status=DeliveryStatus(raw.get("status", DeliveryStatus.QUEUED.value)),
        )


@dataclass(frozen=True)
class CommunicationTemplate:
    id: str
    name: str
    subject: str
    content: str
    category: NotificationCategory = NotificationCategory.GENERAL

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "subject": self.subject,
            "content": self.content,
            "category": self.category.value,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "CommunicationTemplate":
        return cls(
            id=str(raw["id"]),
            name=str(raw.get("name", "")),
            subject=str(raw.get("subject", "")),
            content=str(raw.get("content", "")),
            category=NotificationCategory(raw.get("category", NotificationCategory.GENERAL.value)),
        )


@dataclass(frozen=True)
class SendResult:
    """Response of the mail relay."""

    status: DeliveryStatus
    recipient: str
    category: NotificationCategory
    subject: str
