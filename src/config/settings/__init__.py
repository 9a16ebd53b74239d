"""Agregador de settings do Lembra Agenda.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    LogFormat,
    get_base_settings,
)

# Calendar settings
from config.settings.calendar import (
    MIN_LOOKAHEAD_DAYS,
    CalendarSettings,
    get_calendar_settings,
)

# Scheduler settings
from config.settings.scheduler import (
    DEFAULT_CHECK_INTERVAL_CRON,
    SchedulerSettings,
    get_scheduler_settings,
)

# Channel settings
from config.settings.slack import (
    SLACK_API_BASE_URL,
    SlackSettings,
    get_slack_settings,
)

__all__ = [
    # Constants
    "DEFAULT_CHECK_INTERVAL_CRON",
    "MIN_LOOKAHEAD_DAYS",
    "SLACK_API_BASE_URL",
    "VALID_LOG_LEVELS",
    # Base
    "BaseSettings",
    "CalendarSettings",
    "Environment",
    "LogFormat",
    "SchedulerSettings",
    "SlackSettings",
    "get_base_settings",
    "get_calendar_settings",
    "get_scheduler_settings",
    "get_slack_settings",
]
