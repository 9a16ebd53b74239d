"""Protocolo do registro de lembretes ja disparados.

Interface leve (ABC) dependida pelo avaliador de lembretes, para que um
backend persistente possa substituir o de memoria sem alterar o core.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.reminder import ReminderThreshold


class ReminderLedgerProtocol(ABC):
    """Contrato minimo para o ledger de dedupe de lembretes.

    Uma entrada `(event_id, threshold)` significa "ja notificado".
    """

    @abstractmethod
    def has_fired(self, event_id: str, threshold: ReminderThreshold) -> bool:
        """Consulta pura, sem efeito colateral."""

    @abstractmethod
    def mark_fired(self, event_id: str, threshold: ReminderThreshold) -> None:
        """Registra o par; chamar de novo com o mesmo par nao tem efeito."""
