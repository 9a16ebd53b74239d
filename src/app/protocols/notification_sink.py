"""Contrato do canal de entrega de lembretes.

A entrega e sequencial hoje; paralelizar no futuro fica isolado aqui.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.reminder import NotificationRequest


@runtime_checkable
class NotificationSinkProtocol(Protocol):
    """Entrega um pedido de lembrete; levanta DeliveryError em falha."""

    async def deliver(self, request: NotificationRequest) -> None: ...
