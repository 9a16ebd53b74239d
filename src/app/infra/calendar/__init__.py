"""Adapter Google Calendar para a fonte de eventos."""

from __future__ import annotations

from app.infra.calendar.google_calendar_source import GoogleCalendarSource

__all__ = ["GoogleCalendarSource"]
