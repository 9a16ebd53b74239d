"""Endpoints de health check do bot de lembretes."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

router = APIRouter()

ROOT_BANNER = "Slack–Google Calendar reminder bot is running."


class SchedulerStatus(BaseModel):
    """Estado do agendador de ciclos."""

    running: bool
    cycle_in_flight: bool
    skipped_ticks: int
    cron: str


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    scheduler: SchedulerStatus | None = None
    version: str = "1.0.0"


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Banner simples usado por pings de uptime."""
    return ROOT_BANNER


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe, inclui o estado do agendador quando disponível."""
    scheduler = getattr(request.app.state, "reminder_scheduler", None)
    service = getattr(request.app.state, "service_name", "lembra-agenda")
    status = None
    if scheduler is not None:
        status = SchedulerStatus(
            running=scheduler.running,
            cycle_in_flight=scheduler.cycle_in_flight,
            skipped_ticks=scheduler.skipped_ticks,
            cron=scheduler.cron_expression,
        )
    return HealthResponse(
        status="healthy",
        service=service,
        timestamp=datetime.now(UTC).isoformat(),
        scheduler=status,
    )
