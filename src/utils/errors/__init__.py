"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    EventPublishError,
    InfrastructureError,
    RedisConnectionError,
)

__all__ = [
    "EventPublishError",
    "InfrastructureError",
    "RedisConnectionError",
]
