"""Emitter em memória para desenvolvimento e testes.

Guarda os eventos na ordem de chamada de `emit`.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EmittedEvent:
    """Evento publicado no barramento."""

    topic: str
    event_type: str
    subject: str
    payload: dict[str, Any]


class MemoryEventEmitter:
    """Barramento em memória (implementa EventEmitterProtocol)."""

    def __init__(self, max_events: int = 10000) -> None:
        self._events: list[EmittedEvent] = []
        self._max_events = max_events

    async def emit(
        self,
        topic: str,
        event_type: str,
        subject: str,
        payload: dict[str, Any],
    ) -> None:
        """Registra o evento em memória."""
        self._events.append(
            EmittedEvent(
                topic=topic,
                event_type=event_type,
                subject=subject,
                payload=copy.deepcopy(payload),
            )
        )
        # Limita tamanho para evitar memory leak em dev
        if len(self._events) > self._max_events:
            self._events = self._events[-self._max_events :]
        logger.debug("memory_event_emitted", extra={"topic": topic, "event_type": event_type})

    def get_events(self) -> list[EmittedEvent]:
        """Retorna todos os eventos (apenas para testes)."""
        return list(self._events)

    def clear(self) -> None:
        self._events.clear()
