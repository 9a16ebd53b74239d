"""Observabilidade: correlation_id por ciclo e métricas em log."""

from app.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    measure_latency,
    record_latency,
    record_poll_cycle,
    record_reminder,
)

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "measure_latency",
    "record_latency",
    "record_poll_cycle",
    "record_reminder",
    "reset_correlation_id",
    "set_correlation_id",
]
