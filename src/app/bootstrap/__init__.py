"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, build_reminder_scheduler

    initialize_app()
    scheduler = build_reminder_scheduler()
"""

from __future__ import annotations

import logging

from app.bootstrap.dependencies import (
    build_calendar_source,
    build_notification_sink,
    build_poll_cycle,
    build_reminder_ledger,
    build_reminder_scheduler,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    VALID_LOG_LEVELS,
    get_base_settings,
    get_calendar_settings,
    get_scheduler_settings,
    get_slack_settings,
)

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado com correlation_id por ciclo.

    Deve ser chamada uma vez no início do processo.
    """
    base = get_base_settings()
    # LOG_LEVEL invalido cai para INFO; o erro e reportado por validate_runtime_settings.
    level = base.log_level if base.log_level in VALID_LOG_LEVELS else "INFO"
    configure_logging(
        level=level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        json_format=base.log_format == "json",
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Returns:
        Lista de erros encontrados (vazia = OK).
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"calendar: {error}" for error in get_calendar_settings().validate_settings())
    errors.extend(f"slack: {error}" for error in get_slack_settings().validate_settings())
    errors.extend(f"scheduler: {error}" for error in get_scheduler_settings().validate_settings())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors


__all__ = [
    "build_calendar_source",
    "build_notification_sink",
    "build_poll_cycle",
    "build_reminder_ledger",
    "build_reminder_scheduler",
    "initialize_app",
    "validate_runtime_settings",
]
