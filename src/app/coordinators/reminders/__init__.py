"""Coordenacao dos ciclos de lembrete ao longo do tempo."""

from __future__ import annotations

from app.coordinators.reminders.scheduler import POLL_CYCLE_JOB_ID, ReminderScheduler

__all__ = ["POLL_CYCLE_JOB_ID", "ReminderScheduler"]
