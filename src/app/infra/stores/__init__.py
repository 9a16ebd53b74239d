"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - memory_ledger: Ledger de lembretes disparados (vida do processo)
"""

from __future__ import annotations

from app.infra.stores.memory_ledger import MemoryReminderLedger

__all__ = ["MemoryReminderLedger"]
