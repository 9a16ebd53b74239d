"""Ledger de lembretes em memoria.

Vive apenas durante o processo: um restart (feito pelo ambiente de
hospedagem) zera o registro. A garantia de "no maximo um lembrete" vale
por encarnacao do processo.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.reminder_ledger import ReminderLedgerProtocol

if TYPE_CHECKING:
    from app.domain.reminder import ReminderThreshold

logger = logging.getLogger(__name__)


class MemoryReminderLedger(ReminderLedgerProtocol):
    """Conjunto de pares (event_id, threshold) sem politica de expiracao."""

    __slots__ = ("_fired",)

    def __init__(self) -> None:
        self._fired: set[tuple[str, ReminderThreshold]] = set()

    def has_fired(self, event_id: str, threshold: ReminderThreshold) -> bool:
        return (event_id, threshold) in self._fired

    def mark_fired(self, event_id: str, threshold: ReminderThreshold) -> None:
        self._fired.add((event_id, threshold))
        logger.debug(
            "reminder_ledger_marked",
            extra={"event_id": event_id, "threshold": threshold.name, "size": len(self._fired)},
        )

    def __len__(self) -> int:
        return len(self._fired)
