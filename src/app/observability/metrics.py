"""Métricas do serviço emitidas como logs estruturados.

Não há backend de métricas: cada ponto vira uma linha `metric_*` com
`metric_type`, agregável pelo coletor de logs da plataforma.

- metric_latency: duração de uma operação (ms)
- metric_reminder: um lembrete por antecedência e resultado
- metric_poll_cycle: contagens de um ciclo completo
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

from app.observability.correlation import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


def _emit(name: str, metric_type: str, **fields: object) -> None:
    fields["metric_type"] = metric_type
    fields.setdefault("correlation_id", get_correlation_id())
    logger.info(name, extra=fields)


def record_latency(component: str, operation: str, latency_ms: float) -> None:
    _emit(
        "metric_latency",
        "latency",
        component=component,
        operation=operation,
        latency_ms=round(latency_ms, 2),
    )


@contextmanager
def measure_latency(component: str, operation: str) -> Iterator[None]:
    """Mede o bloco e registra a latência mesmo quando ele levanta."""
    started_at = time.perf_counter()
    try:
        yield
    finally:
        record_latency(component, operation, (time.perf_counter() - started_at) * 1000)


def record_reminder(threshold: str, result: str) -> None:
    """Conta um lembrete; `result` é `delivered` ou `failed`."""
    _emit("metric_reminder", "reminder", threshold=threshold, result=result)


def record_poll_cycle(
    *,
    fetched: int,
    requested: int,
    delivered: int,
    failed_stage: str | None,
) -> None:
    _emit(
        "metric_poll_cycle",
        "poll_cycle",
        fetched=fetched,
        requested=requested,
        delivered=delivered,
        failed_stage=failed_stage,
    )
