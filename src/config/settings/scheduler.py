"""Settings do agendador de ciclos de polling e do modo de execucao."""

from __future__ import annotations

import os
from functools import lru_cache

from apscheduler.triggers.cron import CronTrigger
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CHECK_INTERVAL_CRON = "*/5 * * * *"


class SchedulerSettings(BaseModel):
    """Cadencia dos ciclos e modo de execucao (lido uma vez no startup)."""

    model_config = ConfigDict(extra="ignore")

    check_interval_cron: str = Field(
        default=DEFAULT_CHECK_INTERVAL_CRON,
        description="Expressao cron (5 campos) que dispara cada ciclo.",
    )
    run_once: bool = Field(
        default=False,
        description="Executa um unico ciclo e encerra o processo.",
    )
    port: int = Field(default=3000, ge=1, le=65535, description="Porta do health check.")

    def validate_settings(self) -> list[str]:
        """Valida a expressao cron."""
        errors: list[str] = []
        try:
            CronTrigger.from_crontab(self.check_interval_cron)
        except ValueError:
            errors.append(f"CHECK_INTERVAL_CRON invalido: {self.check_interval_cron}")
        return errors


def _parse_bool(value: str) -> bool:
    """Converte texto de env em bool com o mesmo padrao dos outros settings."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_scheduler_from_env() -> SchedulerSettings:
    """Carrega SchedulerSettings de variaveis de ambiente."""
    return SchedulerSettings(
        check_interval_cron=os.getenv("CHECK_INTERVAL_CRON", DEFAULT_CHECK_INTERVAL_CRON),
        run_once=_parse_bool(os.getenv("RUN_ONCE", "false")),
        port=int(os.getenv("PORT", "3000")),
    )


@lru_cache(maxsize=1)
def get_scheduler_settings() -> SchedulerSettings:
    """Retorna instancia cacheada de SchedulerSettings."""
    return _load_scheduler_from_env()


__all__ = ["DEFAULT_CHECK_INTERVAL_CRON", "SchedulerSettings", "get_scheduler_settings"]
