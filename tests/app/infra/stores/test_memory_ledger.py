"""Testes do ledger de lembretes em memória."""

from __future__ import annotations

from app.domain.reminder import ReminderThreshold
from app.infra.stores import MemoryReminderLedger
from app.protocols.reminder_ledger import ReminderLedgerProtocol


class TestMemoryReminderLedger:
    """Testes do MemoryReminderLedger."""

    def test_new_ledger_has_nothing_fired(self) -> None:
        ledger = MemoryReminderLedger()
        assert ledger.has_fired("evt-1", ReminderThreshold.ONE_DAY) is False
        assert len(ledger) == 0

    def test_mark_then_has_fired(self) -> None:
        ledger = MemoryReminderLedger()
        ledger.mark_fired("evt-1", ReminderThreshold.ONE_DAY)
        assert ledger.has_fired("evt-1", ReminderThreshold.ONE_DAY) is True

    def test_thresholds_are_independent(self) -> None:
        ledger = MemoryReminderLedger()
        ledger.mark_fired("evt-1", ReminderThreshold.ONE_WEEK)
        assert ledger.has_fired("evt-1", ReminderThreshold.ONE_WEEK) is True
        assert ledger.has_fired("evt-1", ReminderThreshold.ONE_DAY) is False

    def test_mark_is_idempotent(self) -> None:
        ledger = MemoryReminderLedger()
        ledger.mark_fired("evt-1", ReminderThreshold.ONE_DAY)
        ledger.mark_fired("evt-1", ReminderThreshold.ONE_DAY)
        assert len(ledger) == 1

    def test_has_fired_has_no_side_effect(self) -> None:
        ledger = MemoryReminderLedger()
        ledger.has_fired("evt-1", ReminderThreshold.ONE_DAY)
        assert len(ledger) == 0

    def test_dedup_is_scoped_to_one_process_incarnation(self) -> None:
        """Um ledger novo (restart do processo) nao conhece pares anteriores."""
        first_run = MemoryReminderLedger()
        first_run.mark_fired("evt-1", ReminderThreshold.ONE_DAY)

        second_run = MemoryReminderLedger()
        assert second_run.has_fired("evt-1", ReminderThreshold.ONE_DAY) is False

    def test_implements_protocol(self) -> None:
        assert isinstance(MemoryReminderLedger(), ReminderLedgerProtocol)
