"""Filter que carimba cada record com o serviço e o ciclo em execução."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def _no_cycle() -> str:
    return ""


class CorrelationIdFilter(logging.Filter):
    """Preenche `service` e `correlation_id` sem que o chamador os passe.

    Fora de um ciclo de polling (startup, health check) o getter devolve
    string vazia. Um `correlation_id` explícito em `extra` tem precedência.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._current_cycle = correlation_id_getter or _no_cycle

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._current_cycle()
        record.service = self._service_name
        return True
