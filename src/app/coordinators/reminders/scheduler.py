"""Driver de agendamento dos ciclos de polling.

Dispara um ciclo por tick de uma expressao cron (APScheduler) ou executa
exatamente um ciclo no modo run-once. Ciclos nunca rodam em paralelo: um
tick que chega com um ciclo ainda em andamento e descartado, assim dois
ciclos nao mutam o ledger ao mesmo tempo.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from config.settings.scheduler import DEFAULT_CHECK_INTERVAL_CRON

if TYPE_CHECKING:
    from datetime import tzinfo

    from app.use_cases.reminders import PollCycleResult, RunPollCycleUseCase

logger = logging.getLogger(__name__)

POLL_CYCLE_JOB_ID = "calendar_poll_cycle"


class ReminderScheduler:
    """Executa o use case de ciclo em cadencia fixa, um ciclo por vez."""

    def __init__(
        self,
        cycle: RunPollCycleUseCase,
        *,
        cron_expression: str = DEFAULT_CHECK_INTERVAL_CRON,
        timezone: tzinfo | str = "UTC",
    ) -> None:
        self._cycle = cycle
        self._trigger = CronTrigger.from_crontab(cron_expression, timezone=timezone)
        self._cron_expression = cron_expression
        self._timezone = timezone
        self._scheduler: AsyncIOScheduler | None = None
        self._cycle_in_flight = False
        self._skipped_ticks = 0

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    @property
    def cycle_in_flight(self) -> bool:
        return self._cycle_in_flight

    @property
    def skipped_ticks(self) -> int:
        return self._skipped_ticks

    @property
    def cron_expression(self) -> str:
        return self._cron_expression

    async def tick(self) -> PollCycleResult | None:
        """Executa um ciclo, ou descarta o tick se ja houver um em andamento."""
        if self._cycle_in_flight:
            self._skipped_ticks += 1
            logger.warning(
                "poll_cycle_tick_skipped",
                extra={"reason": "cycle_in_flight", "skipped_ticks": self._skipped_ticks},
            )
            return None

        self._cycle_in_flight = True
        try:
            logger.info("poll_cycle_tick", extra={"job_id": POLL_CYCLE_JOB_ID})
            return await self._cycle.execute()
        finally:
            self._cycle_in_flight = False

    async def run_once(self) -> PollCycleResult:
        """Modo run-once: exatamente um ciclo, sem agendador."""
        logger.info("poll_cycle_run_once")
        result = await self.tick()
        if result is None:
            raise RuntimeError("run_once chamado com ciclo em andamento")
        return result

    def start(self) -> None:
        """Inicia o AsyncIOScheduler no event loop corrente."""
        if self.running:
            logger.info("reminder_scheduler_already_running")
            return

        scheduler = AsyncIOScheduler(timezone=self._timezone)
        scheduler.add_job(
            self.tick,
            trigger=self._trigger,
            id=POLL_CYCLE_JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        scheduler.start()
        self._scheduler = scheduler
        logger.info(
            "reminder_scheduler_started",
            extra={"cron": self._cron_expression, "job_id": POLL_CYCLE_JOB_ID},
        )

    def shutdown(self) -> None:
        if self._scheduler is None:
            return
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        self._scheduler = None
        logger.info("reminder_scheduler_stopped")
