"""Gerenciamento de correlation_id por ciclo de polling.

Cada ciclo recebe um ID próprio, injetado em todos os logs emitidos
durante o ciclo (fetch, avaliação e entregas). Usa ContextVar para ser
async-safe.

Uso:
    token = set_correlation_id()
    try:
        # executar ciclo
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um ID curto de ciclo (12 hex do UUID v4)."""
    return uuid.uuid4().hex[:12]
