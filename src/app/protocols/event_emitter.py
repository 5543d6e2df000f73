"""Protocolos de publicação no barramento de eventos."""

from __future__ import annotations

from typing import Any, Protocol


class EventEmitterProtocol(Protocol):
    """Contrato mínimo para publicar um evento de domínio.

    Implementações devem levantar `utils.errors.EventPublishError`
    quando o transporte falhar.
    """

    async def emit(
        self,
        topic: str,
        event_type: str,
        subject: str,
        payload: dict[str, Any],
    ) -> None: ...
