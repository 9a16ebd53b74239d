"""Use case de um ciclo de polling: buscar, avaliar e entregar lembretes.

Falhas de busca e de entrega sao capturadas aqui e nunca propagam; um ciclo
ruim nao derruba o processo nem corrompe o ledger.

- FetchError: o ciclo termina sem tocar no ledger; o proximo ciclo busca de novo.
- DeliveryError: o par ja foi marcado pelo avaliador, entao o lembrete nao
  e repetido. Os demais pedidos do ciclo continuam sendo entregues.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Literal

from app.observability import (
    measure_latency,
    record_poll_cycle,
    record_reminder,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings.calendar import MIN_LOOKAHEAD_DAYS
from utils.errors import DeliveryError, FetchError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.reminder import NotificationRequest
    from app.protocols.calendar_source import CalendarSourceProtocol
    from app.protocols.notification_sink import NotificationSinkProtocol
    from app.services.reminder_evaluator import ReminderEvaluator

logger = logging.getLogger(__name__)

_COMPONENT = "poll_cycle"

FailedStage = Literal["fetch", "evaluate"]


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class PollCycleResult:
    """Resumo de um ciclo para logs e testes."""

    fetched: int = 0
    requested: int = 0
    delivered: int = 0
    delivery_failures: int = 0
    failed_stage: FailedStage | None = None

    @property
    def ok(self) -> bool:
        return self.failed_stage is None and self.delivery_failures == 0


class RunPollCycleUseCase:
    """Orquestra fetch -> avaliacao -> entrega sequencial."""

    def __init__(
        self,
        source: CalendarSourceProtocol,
        sink: NotificationSinkProtocol,
        evaluator: ReminderEvaluator,
        *,
        clock: Callable[[], datetime] = utc_now,
        lookahead: timedelta = timedelta(days=MIN_LOOKAHEAD_DAYS),
    ) -> None:
        if lookahead < timedelta(days=MIN_LOOKAHEAD_DAYS):
            raise ValueError(f"lookahead deve cobrir ao menos {MIN_LOOKAHEAD_DAYS} dias")
        self._source = source
        self._sink = sink
        self._evaluator = evaluator
        self._clock = clock
        self._lookahead = lookahead

    async def execute(self) -> PollCycleResult:
        """Executa um ciclo completo; nunca levanta por falha de fetch/entrega."""
        token = set_correlation_id()
        try:
            with measure_latency(_COMPONENT, "execute"):
                result = await self._run()
            record_poll_cycle(
                fetched=result.fetched,
                requested=result.requested,
                delivered=result.delivered,
                failed_stage=result.failed_stage,
            )
        finally:
            reset_correlation_id(token)
        return result

    async def _run(self) -> PollCycleResult:
        now = self._clock()
        window_end = now + self._lookahead

        try:
            events = await self._source.fetch_events(now, window_end)
        except FetchError as exc:
            logger.error(
                "poll_cycle_fetch_failed",
                extra={"component": _COMPONENT, "error": str(exc)},
            )
            return PollCycleResult(failed_stage="fetch")
        except Exception:
            logger.exception("poll_cycle_fetch_unexpected_error", extra={"component": _COMPONENT})
            return PollCycleResult(failed_stage="fetch")

        if not events:
            logger.info(
                "poll_cycle_no_upcoming_events",
                extra={"component": _COMPONENT, "lookahead_days": self._lookahead.days},
            )

        try:
            requests = self._evaluator.evaluate(events, now)
        except Exception:
            logger.exception("poll_cycle_evaluate_failed", extra={"component": _COMPONENT})
            return PollCycleResult(fetched=len(events), failed_stage="evaluate")

        delivered = 0
        failures = 0
        for request in requests:
            if await self._deliver(request):
                delivered += 1
            else:
                failures += 1

        result = PollCycleResult(
            fetched=len(events),
            requested=len(requests),
            delivered=delivered,
            delivery_failures=failures,
        )
        logger.info(
            "poll_cycle_finished",
            extra={
                "component": _COMPONENT,
                "fetched": result.fetched,
                "requested": result.requested,
                "delivered": result.delivered,
                "delivery_failures": result.delivery_failures,
            },
        )
        return result

    async def _deliver(self, request: NotificationRequest) -> bool:
        try:
            await self._sink.deliver(request)
        except DeliveryError as exc:
            logger.error(
                "reminder_delivery_failed",
                extra={
                    "component": _COMPONENT,
                    "event_id": request.event_id,
                    "threshold": request.threshold.name,
                    "error": str(exc),
                },
            )
            record_reminder(request.threshold.name, "failed")
            return False
        except Exception:
            logger.exception(
                "reminder_delivery_unexpected_error",
                extra={
                    "component": _COMPONENT,
                    "event_id": request.event_id,
                    "threshold": request.threshold.name,
                },
            )
            record_reminder(request.threshold.name, "failed")
            return False

        logger.info(
            "reminder_delivered",
            extra={
                "component": _COMPONENT,
                "event_id": request.event_id,
                "threshold": request.threshold.name,
            },
        )
        record_reminder(request.threshold.name, "delivered")
        return True
