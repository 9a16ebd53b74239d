"""Helpers internos de parsing para respostas da Google Calendar API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from app.domain.reminder import CalendarEvent

if TYPE_CHECKING:
    from googleapiclient.errors import HttpError

logger = logging.getLogger(__name__)


def map_calendar_events(items: list[Any]) -> list[CalendarEvent]:
    """Converte itens brutos em eventos, descartando os mal formados."""
    events: list[CalendarEvent] = []
    for item in items:
        event = parse_calendar_event(item)
        if event is not None:
            events.append(event)
    dropped = len(items) - len(events)
    if dropped:
        logger.debug("google_calendar_items_dropped", extra={"dropped": dropped})
    return events


def parse_calendar_event(payload: Any) -> CalendarEvent | None:
    if not isinstance(payload, dict):
        return None
    try:
        event = CalendarEvent.model_validate(payload)
    except ValidationError:
        return None
    return event if event.is_well_formed else None


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None
