"""Emitters: implementações concretas do barramento de eventos.

Módulos disponíveis:
    - pubsub_emitter: Google Cloud Pub/Sub (staging/production)
    - memory_emitter: Barramento em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.events.memory_emitter import EmittedEvent, MemoryEventEmitter
from app.infra.events.pubsub_emitter import PubSubEventEmitter

__all__ = [
    "EmittedEvent",
    "MemoryEventEmitter",
    "PubSubEventEmitter",
]
