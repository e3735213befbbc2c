from __future__ import annotations

from collections import Counter
from typing import Sequence

from ..core.enums import DeliveryStatus
from .model import NotificationLog


def search_logs(logs: Sequence[NotificationLog], text: str) -> list[NotificationLog]:
    needle = (text or "").strip().lower()
    if not needle:
        return list(logs)
    return [
        log
        for log in logs
        if needle in log.student_name.lower()
        or needle in log.recipient_email.lower()
        or needle in log.subject.lower()
    ]


def count_by_status(logs: Sequence[NotificationLog]) -> dict[str, int]:
    counts = Counter(log.status for log in logs)
    return {status.value: counts.get(status, 0) for status in DeliveryStatus}
