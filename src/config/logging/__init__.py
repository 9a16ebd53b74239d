"""Logging estruturado do Lembra Agenda.

`configure_logging` roda uma vez no bootstrap; os módulos usam
`logging.getLogger(__name__)` e mensagens snake_case com `extra`.
Em JSON cada linha traz asctime, level, logger, message, service e
correlation_id (o ID do ciclo de polling).
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
]
