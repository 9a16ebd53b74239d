"""Serviços de aplicação.

Regras de lembrete puras (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.date_window import ReminderWindow, resolve_window, to_calendar_date
from app.services.reminder_evaluator import ReminderEvaluator
from app.services.reminder_message import build_notification_request

__all__ = [
    "ReminderEvaluator",
    "ReminderWindow",
    "build_notification_request",
    "resolve_window",
    "to_calendar_date",
]
