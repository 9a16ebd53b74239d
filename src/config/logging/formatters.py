"""Formatters JSON (produção) e texto (LOG_FORMAT=text, uso local)."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Ordem em que os campos aparecem em cada linha
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(service)s:%(correlation_id)s] %(name)s - %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Uma linha JSON por record, ex.:

        {"asctime": "...", "level": "INFO", "logger": "app.use_cases...",
         "message": "poll_cycle_finished", "correlation_id": "3f2a9c1b7d4e",
         "service": "lembra-agenda", "requested": 2}

    Campos de `extra` entram como chaves adicionais.
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )


def create_text_formatter() -> logging.Formatter:
    return logging.Formatter(TEXT_LOG_FORMAT)
