from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from src.school_admin.school_admin.communications.model import SendResult
from src.school_admin.school_admin.core.enums import DeliveryStatus
from src.school_admin.school_admin.storage.memory_storage import InMemoryStorage
from src.school_admin.school_admin.store.store import SchoolStore


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingRelay:
    """Mail relay fake: records calls, replies with a fixed status."""

    def __init__(self, status: DeliveryStatus = DeliveryStatus.SENT):
        self.status = status
        self.calls: list[tuple] = []

    def send(self, recipient, subject, body, category) -> SendResult:
        self.calls.append((recipient, subject, body, category))
        return SendResult(status=self.status, recipient=recipient, category=category, subject=subject)


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 2, 2)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage, clock) -> SchoolStore:
    return SchoolStore(storage, clock=clock)


@pytest.fixture
def relay() -> RecordingRelay:
    return RecordingRelay()
