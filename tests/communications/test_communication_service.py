from __future__ import annotations

import itertools
import random

import pytest

from conftest import RecordingRelay
from src.school_admin.school_admin.communications.mail_relay import SimulatedMailRelay
from src.school_admin.school_admin.communications.queries import count_by_status
from src.school_admin.school_admin.communications.service import CommunicationService
from src.school_admin.school_admin.core.enums import DeliveryStatus, NotificationCategory


def _service(store, relay, fixed_now) -> CommunicationService:
    counter = itertools.count(1)
    return CommunicationService(store, relay, clock=lambda: fixed_now, id_factory=lambda: f"log-{next(counter)}")


@pytest.fixture
def service(store, relay, fixed_now) -> CommunicationService:
    return _service(store, relay, fixed_now)


def test_failed_send_is_logged_exactly_once(store, fixed_now):
    service = _service(store, RecordingRelay(DeliveryStatus.FAILED), fixed_now)

    logs = service.send_message(subject="Hello", body="Body", student_id="S002")

    assert len(logs) == 1
    assert [log.status for log in store.state.notification_logs] == [DeliveryStatus.FAILED]
    assert store.state.notification_logs[0].recipient_email == "williams.parent@example.com"


def test_broadcast_sends_in_order_and_logs_newest_first(service, relay, store):
    service.send_message(subject="Update", body="News", category=NotificationCategory.EVENT)

    assert [call[0] for call in relay.calls] == ["johnson.parent@example.com", "williams.parent@example.com"]
    assert [log.id for log in store.state.notification_logs] == ["log-2", "log-1"]
    assert all(log.type == NotificationCategory.EVENT for log in store.state.notification_logs)


def test_log_timestamp_comes_from_clock(service, store):
    service.send_message(subject="Hi", body="x", student_id="S001")

    assert store.state.notification_logs[0].timestamp == "2026-02-02T08:30:00.000Z"


def test_placeholders_are_substituted_per_recipient(service, relay):
    service.send_message(
        subject="Note for [StudentName]",
        body="Dear [GuardianName], [StudentName] did well. Thanks, [GuardianName].",
        student_id="S001",
    )

    _, subject, body, _ = relay.calls[0]
    assert subject == "Note for Alex Johnson"
    assert body == "Dear Mark Johnson, Alex Johnson did well. Thanks, Mark Johnson."


def test_unknown_student_sends_nothing(service, relay, store):
    assert service.send_message(subject="x", body="y", student_id="S999") == []
    assert relay.calls == []
    assert store.state.notification_logs == ()


def test_send_template_uses_template_category(service, relay):
    logs = service.send_template("temp-2", student_id="S002")

    assert logs[0].type == NotificationCategory.FEE
    assert "Sarah Williams" in relay.calls[0][2]
    assert service.send_template("nope") == []


def test_report_card_and_low_grade_subjects(service):
    report = service.send_report_card("S001", term=2)
    alert = service.notify_low_grade("S002", subject_name="Mathematics", score=45)

    assert report.subject == "Term 2 Report: Alex Johnson"
    assert alert.subject == "Performance Alert: Mathematics"
    assert alert.type == NotificationCategory.ACADEMIC
    assert service.notify_low_grade("S404", subject_name="Art") is None


def test_search_logs_and_counts(service, store):
    service.send_message(subject="Fees due", body="x", student_id="S001")
    service.send_message(subject="Trip", body="x", student_id="S002")

    assert [log.student_name for log in service.list_logs("fees")] == ["Alex Johnson"]
    assert [log.student_name for log in service.list_logs("WILLIAMS")] == ["Sarah Williams"]
    assert len(service.list_logs("")) == 2
    assert count_by_status(store.state.notification_logs) == {"SENT": 2, "FAILED": 0, "QUEUED": 0}


def test_simulated_relay_always_fails_at_rate_one():
    relay = SimulatedMailRelay(failure_rate=1.0, latency_seconds=0.5, sleep=lambda _: None)

    result = relay.send("a@b.com", "Subject", "Body", NotificationCategory.GENERAL)

    assert result.status == DeliveryStatus.FAILED
    assert result.recipient == "a@b.com"


def test_simulated_relay_never_fails_at_rate_zero():
    waits = []
    relay = SimulatedMailRelay(failure_rate=0.0, latency_seconds=0.25, rng=random.Random(7), sleep=waits.append)

    statuses = {relay.send("a@b.com", "s", "b", NotificationCategory.FEE).status for _ in range(50)}

    assert statuses == {DeliveryStatus.SENT}
    assert waits == [0.25] * 50


def test_simulated_relay_rejects_bad_rate():
    with pytest.raises(ValueError):
        SimulatedMailRelay(failure_rate=1.5)
