"""Protocolos e contratos do core da aplicação."""

from .calendar_source import CalendarSourceProtocol
from .notification_sink import NotificationSinkProtocol
from .reminder_ledger import ReminderLedgerProtocol

__all__ = [
    "CalendarSourceProtocol",
    "NotificationSinkProtocol",
    "ReminderLedgerProtocol",
]
