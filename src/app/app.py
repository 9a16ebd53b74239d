"""Entrypoint do Lembra Agenda.

Dois modos, escolhidos uma vez no startup por RUN_ONCE:

- run-once: executa exatamente um ciclo de polling e encerra
  (exit 0; exit 1 só em falha inesperada da orquestração).
- contínuo: serve o health check via uvicorn e agenda os ciclos no
  lifespan da aplicação FastAPI.

Uso:
    lembra-agenda                       # modo conforme RUN_ONCE
    uvicorn app.app:app --port 3000     # modo contínuo direto
"""

from __future__ import annotations

import asyncio
import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import (
    build_reminder_scheduler,
    initialize_app,
    validate_runtime_settings,
)
from config.logging import get_logger
from config.settings import get_base_settings, get_scheduler_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

    from app.coordinators.reminders import ReminderScheduler

# Inicializar logging ANTES de qualquer log de startup
initialize_app()

logger = get_logger(__name__)


def create_app(
    scheduler_factory: Callable[[], ReminderScheduler] = build_reminder_scheduler,
) -> FastAPI:
    """Cria a aplicação FastAPI com o agendador no lifespan."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        service_name = get_base_settings().service_name
        logger.info("app_starting", extra={"service": service_name})
        validate_runtime_settings()
        app.state.service_name = service_name

        scheduler = scheduler_factory()
        app.state.reminder_scheduler = scheduler
        scheduler.start()

        yield

        logger.info("app_shutting_down", extra={"service": service_name})
        scheduler.shutdown()

    fastapi_app = FastAPI(
        title="Lembra Agenda",
        description="Lembretes de eventos do Google Calendar no Slack",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
    )
    fastapi_app.include_router(create_api_router())
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


async def run_once(
    scheduler_factory: Callable[[], ReminderScheduler] = build_reminder_scheduler,
) -> int:
    """Executa um único ciclo e devolve o exit code do processo."""
    try:
        validate_runtime_settings()
        scheduler = scheduler_factory()
        result = await scheduler.run_once()
    except Exception:
        logger.exception("run_once_failed")
        return 1

    logger.info(
        "run_once_finished",
        extra={
            "fetched": result.fetched,
            "requested": result.requested,
            "delivered": result.delivered,
            "failed_stage": result.failed_stage,
        },
    )
    return 0


def main() -> None:
    """Entrypoint de linha de comando."""
    settings = get_scheduler_settings()
    if settings.run_once:
        sys.exit(asyncio.run(run_once()))

    import uvicorn

    logger.info("app_serving", extra={"port": settings.port, "cron": settings.check_interval_cron})
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
