"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DeliveryError,
    FetchError,
    InfrastructureError,
)

__all__ = [
    "DeliveryError",
    "FetchError",
    "InfrastructureError",
]
