"""Avaliador de lembretes: decide quais pares (evento, antecedencia) disparar.

Para cada evento, na ordem recebida:
1. ignora eventos sem id ou sem inicio (sem efeito colateral)
2. calcula a data de calendario no timezone configurado
3. amanha e ainda nao disparado -> pedido ONE_DAY, depois marca no ledger
4. daqui a 7 dias e ainda nao disparado -> pedido ONE_WEEK, depois marca

O ledger e marcado assim que o pedido e montado, antes da entrega. Uma
entrega que falhar depois disso nao e repetida nos ciclos seguintes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.reminder import ReminderThreshold
from app.services.date_window import (
    event_calendar_date,
    resolve_window,
    to_calendar_date,
)
from app.services.reminder_message import build_notification_request

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime, tzinfo

    from app.domain.reminder import CalendarEvent, NotificationRequest
    from app.protocols.reminder_ledger import ReminderLedgerProtocol
    from app.services.date_window import CalendarDateConverter

logger = logging.getLogger(__name__)

_COMPONENT = "reminder_evaluator"


class ReminderEvaluator:
    """Aplica o classificador de datas e o ledger a um lote de eventos."""

    __slots__ = ("_converter", "_ledger", "_zone")

    def __init__(
        self,
        ledger: ReminderLedgerProtocol,
        zone: tzinfo,
        *,
        converter: CalendarDateConverter = to_calendar_date,
    ) -> None:
        self._ledger = ledger
        self._zone = zone
        self._converter = converter

    def evaluate(
        self,
        events: Iterable[CalendarEvent],
        now: datetime,
    ) -> list[NotificationRequest]:
        window = resolve_window(now, self._zone, converter=self._converter)
        requests: list[NotificationRequest] = []
        skipped = 0

        for event in events:
            start = event.start
            if not event.is_well_formed or start is None:
                skipped += 1
                continue

            event_date = event_calendar_date(start, self._zone, converter=self._converter)
            if event_date is None:
                skipped += 1
                continue

            if window.is_tomorrow(event_date):
                self._fire(event, ReminderThreshold.ONE_DAY, requests)
            if window.is_one_week_out(event_date):
                self._fire(event, ReminderThreshold.ONE_WEEK, requests)

        logger.info(
            "reminders_evaluated",
            extra={
                "component": _COMPONENT,
                "today": window.today.isoformat(),
                "requested": len(requests),
                "skipped_malformed": skipped,
            },
        )
        return requests

    def _fire(
        self,
        event: CalendarEvent,
        threshold: ReminderThreshold,
        requests: list[NotificationRequest],
    ) -> None:
        event_id = event.id or ""
        if self._ledger.has_fired(event_id, threshold):
            return
        requests.append(build_notification_request(event, threshold, self._zone))
        self._ledger.mark_fired(event_id, threshold)
