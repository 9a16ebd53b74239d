"""Casos de uso de lembretes de calendario."""

from __future__ import annotations

from app.use_cases.reminders.run_poll_cycle import PollCycleResult, RunPollCycleUseCase

__all__ = ["PollCycleResult", "RunPollCycleUseCase"]
