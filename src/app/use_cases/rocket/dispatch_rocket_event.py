"""Use case de dedupe + despacho de mensagens de telemetria.

Garante no máximo um evento por (channel, messageNumber):
1. Verifica e registra o par no ledger em uma única operação atômica
2. Duplicado: sucesso sem emitir (entrega at-least-once é esperada)
3. Novo: o registro já está visível antes do emit; emite um único evento

Falha de emit sobe como EventPublishError e o registro permanece no
ledger (reentrega da mesma mensagem será tratada como duplicada).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.use_cases.rocket._event_helpers import build_rocket_event
from utils.errors import EventPublishError

if TYPE_CHECKING:
    from app.domain.rocket_message import RocketMessage
    from app.protocols import AsyncDedupeProtocol, EventEmitterProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Resultado do despacho de uma mensagem."""

    emitted: bool
    duplicate: bool
    event_type: str | None = None


class DispatchRocketEventUseCase:
    """Deduplica e publica mensagens já validadas."""

    def __init__(
        self,
        *,
        dedupe: AsyncDedupeProtocol,
        emitter: EventEmitterProtocol,
    ) -> None:
        self._dedupe = dedupe
        self._emitter = emitter

    async def execute(self, message: RocketMessage) -> DispatchResult:
        """Despacha a mensagem (0 ou 1 evento emitido).

        Raises:
            EventPublishError: Se o barramento falhar ao publicar
            RedisConnectionError: Se o ledger estiver indisponível
        """
        channel = message.channel
        sequence = message.message_number

        if await self._dedupe.seen_async(channel, sequence):
            logger.info(
                "rocket_message_duplicate",
                extra={
                    "channel": channel,
                    "sequence": sequence,
                    "message_type": str(message.message_type),
                },
            )
            return DispatchResult(emitted=False, duplicate=True)

        event = build_rocket_event(message)
        try:
            await self._emitter.emit(event.topic, event.event_type, event.subject, event.payload)
        except EventPublishError:
            self._log_publish_failed(channel, sequence, event.event_type)
            raise
        except Exception as exc:
            self._log_publish_failed(channel, sequence, event.event_type)
            raise EventPublishError(
                "Falha ao publicar evento", topic=event.topic, event_type=event.event_type
            ) from exc

        logger.info(
            "rocket_event_emitted",
            extra={
                "channel": channel,
                "sequence": sequence,
                "topic": event.topic,
                "event_type": event.event_type,
            },
        )
        return DispatchResult(emitted=True, duplicate=False, event_type=event.event_type)

    @staticmethod
    def _log_publish_failed(channel: str, sequence: int | float, event_type: str) -> None:
        # Registro no ledger é mantido; não há retry no core
        logger.error(
            "rocket_event_publish_failed",
            extra={"channel": channel, "sequence": sequence, "event_type": event_type},
        )
