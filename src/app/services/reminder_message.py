"""Montagem dos campos exibidos em um lembrete.

Descricoes do Google Calendar podem vir com HTML; aqui viram texto simples
antes de chegar ao canal de entrega.
"""

from __future__ import annotations

import html
import re
from typing import TYPE_CHECKING

from app.domain.reminder import NotificationRequest

if TYPE_CHECKING:
    from datetime import tzinfo

    from app.domain.reminder import CalendarEvent, EventStart, ReminderThreshold

UNTITLED_EVENT = "Untitled event"
DESCRIPTION_MAX_CHARS = 500

_BREAK_TAGS = re.compile(r"<\s*(br|/p|/div|/li)\s*/?\s*>", re.IGNORECASE)
_ANY_TAG = re.compile(r"<[^>]+>")
_BLANK_LINES = re.compile(r"\n\s*\n+")
_SPACES = re.compile(r"[ \t\r\f\v]+")


def build_notification_request(
    event: CalendarEvent,
    threshold: ReminderThreshold,
    zone: tzinfo,
) -> NotificationRequest:
    """Cria o pedido de lembrete a partir de um evento bem formado."""
    if not event.id or event.start is None:
        raise ValueError("malformed_event")
    return NotificationRequest(
        event_id=event.id,
        threshold=threshold,
        title=(event.summary or "").strip() or UNTITLED_EVENT,
        start_display=format_event_start(event.start, zone),
        description=sanitize_description(event.description),
        link=event.html_link or None,
        location=(event.location or "").strip() or None,
    )


def format_event_start(start: EventStart, zone: tzinfo) -> str:
    """Data legivel: so a data para dia inteiro, data+hora local para timed."""
    if start.date_time is None:
        if start.date is None:
            raise ValueError("missing_event_start")
        return start.date.strftime("%a, %b %d, %Y")
    instant = start.date_time
    local = instant.replace(tzinfo=zone) if instant.tzinfo is None else instant.astimezone(zone)
    return local.strftime("%a, %b %d, %Y %H:%M %Z").strip()


def sanitize_description(raw: str | None) -> str | None:
    """Remove markup, decodifica entidades e limita o tamanho."""
    if not raw:
        return None
    text = _BREAK_TAGS.sub("\n", raw)
    text = _ANY_TAG.sub("", text)
    text = html.unescape(text)
    lines = [_SPACES.sub(" ", line).strip() for line in text.split("\n")]
    text = _BLANK_LINES.sub("\n\n", "\n".join(lines)).strip()
    if not text:
        return None
    if len(text) > DESCRIPTION_MAX_CHARS:
        text = text[: DESCRIPTION_MAX_CHARS - 1].rstrip() + "…"
    return text
