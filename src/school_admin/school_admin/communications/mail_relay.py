from __future__ import annotations

import logging
import random
import time
from typing import Callable, Optional, Protocol

from ..core.constants import DEFAULT_MAIL_FAILURE_RATE, DEFAULT_MAIL_LATENCY_SECONDS
from ..core.enums import DeliveryStatus, NotificationCategory
from .model import SendResult

logger = logging.getLogger(__name__)


class MailRelay(Protocol):
    def send(self, recipient: str, subject: str, body: str, category: NotificationCategory) -> SendResult:
        raise NotImplementedError


class SimulatedMailRelay(MailRelay):
    """Stand-in for the school's mail relay.

    Waits ``latency_seconds`` and then fails with probability ``failure_rate``.
    A failure carries no detail beyond the FAILED status.
    """

    def __init__(
        self,
        *,
        failure_rate: float = DEFAULT_MAIL_FAILURE_RATE,
        latency_seconds: float = DEFAULT_MAIL_LATENCY_SECONDS,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError("failure_rate must be within [0, 1]")
        self._failure_rate = float(failure_rate)
        self._latency = max(float(latency_seconds), 0.0)
        self._rng = rng or random.Random()
        self._sleep = sleep

    def send(self, recipient: str, subject: str, body: str, category: NotificationCategory) -> SendResult:
        logger.info("Dispatching %s message to %s", category.value, recipient)
        if self._latency:
            self._sleep(self._latency)

        healthy = self._rng.random() >= self._failure_rate
        status = DeliveryStatus.SENT if healthy else DeliveryStatus.FAILED
        if not healthy:
            logger.warning("Relay rejected message to %s (%s)", recipient, subject)
        return SendResult(status=status, recipient=recipient, category=category, subject=subject)
