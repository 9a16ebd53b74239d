"""Contrato da fonte de eventos de calendario.

Mantemos apenas o protocolo aqui para permitir troca de provider sem
impactar o ciclo de polling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from app.domain.reminder import CalendarEvent


@runtime_checkable
class CalendarSourceProtocol(Protocol):
    """Busca eventos que comecam dentro de uma janela de tempo."""

    async def fetch_events(
        self,
        window_start: datetime,
        window_end: datetime,
    ) -> Sequence[CalendarEvent]:
        """Retorna eventos ordenados por inicio; levanta FetchError em falha."""
        ...
