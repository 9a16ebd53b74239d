"""Factories: criação das implementações concretas do ciclo de lembretes.

O ledger é criado uma única vez por processo e passado explicitamente ao
avaliador; não existe estado global de dedupe.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from apscheduler.triggers.cron import CronTrigger

from app.coordinators.reminders import ReminderScheduler
from app.infra.calendar import GoogleCalendarSource
from app.infra.slack import SlackNotifier
from app.infra.stores import MemoryReminderLedger
from app.services.reminder_evaluator import ReminderEvaluator
from app.use_cases.reminders import RunPollCycleUseCase
from config.settings import (
    DEFAULT_CHECK_INTERVAL_CRON,
    MIN_LOOKAHEAD_DAYS,
    get_calendar_settings,
    get_scheduler_settings,
    get_slack_settings,
)

if TYPE_CHECKING:
    from app.protocols.calendar_source import CalendarSourceProtocol
    from app.protocols.notification_sink import NotificationSinkProtocol
    from app.protocols.reminder_ledger import ReminderLedgerProtocol

logger = logging.getLogger(__name__)


def build_reminder_ledger() -> ReminderLedgerProtocol:
    """Cria o ledger em memória (vida do processo)."""
    ledger = MemoryReminderLedger()
    logger.info("reminder_ledger_created", extra={"backend": "memory"})
    return ledger


def build_calendar_source() -> CalendarSourceProtocol:
    """Cria a fonte Google Calendar a partir das settings."""
    return GoogleCalendarSource.from_settings(get_calendar_settings())


def build_notification_sink() -> NotificationSinkProtocol:
    """Cria o notificador Slack a partir das settings."""
    return SlackNotifier.from_settings(get_slack_settings())


def resolve_calendar_zone(name: str) -> ZoneInfo:
    """ZoneInfo do CALENDAR_TIMEZONE; nome invalido cai para UTC com alerta.

    Em staging/production validate_runtime_settings ja bloqueou o boot.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(
            "calendar_timezone_fallback",
            extra={"component": "bootstrap", "configured": name, "fallback": "UTC"},
        )
        return ZoneInfo("UTC")


def resolve_check_interval_cron(expression: str) -> str:
    """Expressao cron configurada, ou a padrao quando invalida."""
    try:
        CronTrigger.from_crontab(expression)
    except ValueError:
        logger.warning(
            "check_interval_cron_fallback",
            extra={
                "component": "bootstrap",
                "configured": expression,
                "fallback": DEFAULT_CHECK_INTERVAL_CRON,
            },
        )
        return DEFAULT_CHECK_INTERVAL_CRON
    return expression


def build_poll_cycle(
    *,
    source: CalendarSourceProtocol | None = None,
    sink: NotificationSinkProtocol | None = None,
    ledger: ReminderLedgerProtocol | None = None,
) -> RunPollCycleUseCase:
    """Monta o use case de ciclo; colaboradores podem ser injetados."""
    calendar_settings = get_calendar_settings()
    zone = resolve_calendar_zone(calendar_settings.calendar_timezone)
    lookahead_days = max(calendar_settings.calendar_lookahead_days, MIN_LOOKAHEAD_DAYS)
    evaluator = ReminderEvaluator(ledger or build_reminder_ledger(), zone)
    return RunPollCycleUseCase(
        source or build_calendar_source(),
        sink or build_notification_sink(),
        evaluator,
        lookahead=timedelta(days=lookahead_days),
    )


def build_reminder_scheduler(cycle: RunPollCycleUseCase | None = None) -> ReminderScheduler:
    """Monta o driver de agendamento com a cadência configurada."""
    scheduler_settings = get_scheduler_settings()
    return ReminderScheduler(
        cycle or build_poll_cycle(),
        cron_expression=resolve_check_interval_cron(scheduler_settings.check_interval_cron),
        timezone=resolve_calendar_zone(get_calendar_settings().calendar_timezone),
    )
