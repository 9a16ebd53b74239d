"""Instalação do handler único do root logger.

Chamado pelo bootstrap antes de qualquer log de startup:

    configure_logging(level="INFO", service_name="lembra-agenda",
                      correlation_id_getter=get_correlation_id)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter, create_text_formatter
from config.settings.base import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS

if TYPE_CHECKING:
    from collections.abc import Callable

# Ruidosos em INFO: discovery do googleapiclient, cada request do httpx,
# cada execução de job do APScheduler.
_NOISY_LOGGERS = ("googleapiclient.discovery_cache", "httpx", "apscheduler.executors.default")


def _normalize_level(level: str) -> str:
    normalized = level.upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return normalized


def _build_handler(
    level: str,
    service_name: str,
    correlation_id_getter: Callable[[], str] | None,
    json_format: bool,
) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(create_json_formatter() if json_format else create_text_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    return handler


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    *,
    json_format: bool = True,
) -> None:
    """Substitui os handlers do root por um único handler estruturado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    normalized = _normalize_level(level)

    root = logging.getLogger()
    root.setLevel(normalized)
    root.handlers = [_build_handler(normalized, service_name, correlation_id_getter, json_format)]

    if normalized != "DEBUG":
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
