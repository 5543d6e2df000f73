"""Use case canônico de ingestão: decode -> dedupe -> emit."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from api.validators.rocket import MessageValidationError, decode_rocket_message
from app.observability import get_correlation_id, record_ingest_outcome, record_latency
from utils.errors import EventPublishError

if TYPE_CHECKING:
    from app.protocols import RocketMessageDecoderProtocol
    from app.use_cases.rocket.dispatch_rocket_event import (
        DispatchResult,
        DispatchRocketEventUseCase,
    )

logger = logging.getLogger(__name__)


class IngestRocketMessageUseCase:
    """Processa um corpo de request já desserializado.

    Args:
        dispatcher: Use case de dedupe + despacho
        decoder: Função de decode (padrão: decode_rocket_message)
    """

    def __init__(
        self,
        *,
        dispatcher: DispatchRocketEventUseCase,
        decoder: RocketMessageDecoderProtocol = decode_rocket_message,
    ) -> None:
        self._dispatcher = dispatcher
        self._decoder = decoder

    async def execute(self, data: Any) -> DispatchResult:
        """Executa o fluxo completo para um corpo de request.

        Raises:
            MessageValidationError: Entrada malformada (400)
            EventPublishError: Falha no barramento (5xx)
        """
        started_at = time.perf_counter()
        correlation_id = get_correlation_id()
        try:
            return await self._run(data, correlation_id)
        finally:
            # Latência registrada em todos os desfechos, inclusive falhas
            record_latency(
                "ingest",
                "execute",
                (time.perf_counter() - started_at) * 1000,
                correlation_id,
            )

    async def _run(self, data: Any, correlation_id: str) -> DispatchResult:
        try:
            message = self._decoder(data)
        except MessageValidationError as exc:
            logger.warning(
                "rocket_message_rejected",
                extra={"reason": exc.reason, "error_type": type(exc).__name__},
            )
            record_ingest_outcome("rejected", correlation_id=correlation_id)
            raise

        message_type = str(message.message_type)
        try:
            result = await self._dispatcher.execute(message)
        except EventPublishError:
            record_ingest_outcome(
                "publish_failed", message_type=message_type, correlation_id=correlation_id
            )
            raise

        record_ingest_outcome(
            "duplicate" if result.duplicate else "accepted",
            message_type=message_type,
            correlation_id=correlation_id,
        )
        return result
