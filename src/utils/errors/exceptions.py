"""Exceções de domínio para falhas recuperáveis de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class FetchError(InfrastructureError):
    """Falha ao buscar eventos na fonte de calendário (auth, rede, cota).

    Nenhuma marca de dedupe foi feita quando esta falha ocorre; o ciclo
    seguinte busca tudo de novo.
    """


class DeliveryError(InfrastructureError):
    """Falha ao entregar um lembrete no canal de notificação."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
