"""Exceções de domínio para falhas recuperáveis de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao acessar Redis."""


class EventPublishError(InfrastructureError):
    """Falha ao publicar evento no barramento (downstream publish failed).

    Attributes:
        topic: Tópico lógico do evento
        event_type: Tipo do evento que não foi publicado
    """

    def __init__(self, message: str, *, topic: str = "", event_type: str = "") -> None:
        super().__init__(message)
        self.topic = topic
        self.event_type = event_type
