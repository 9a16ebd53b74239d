"""Fake do canal de entrega que registra tentativas e entregas."""

from __future__ import annotations

from app.domain.reminder import NotificationRequest, ReminderThreshold
from utils.errors import DeliveryError


class FakeNotificationSink:
    """Entrega em memoria; pares em `fail_for` levantam DeliveryError."""

    def __init__(
        self,
        *,
        fail_for: set[tuple[str, ReminderThreshold]] | None = None,
        fail_all: bool = False,
    ) -> None:
        self._fail_for = fail_for or set()
        self._fail_all = fail_all
        self.attempts: list[NotificationRequest] = []
        self.delivered: list[NotificationRequest] = []

    async def deliver(self, request: NotificationRequest) -> None:
        self.attempts.append(request)
        if self._fail_all or (request.event_id, request.threshold) in self._fail_for:
            raise DeliveryError("fake_delivery_error")
        self.delivered.append(request)

    def delivered_pairs(self) -> list[tuple[str, ReminderThreshold]]:
        return [(request.event_id, request.threshold) for request in self.delivered]
