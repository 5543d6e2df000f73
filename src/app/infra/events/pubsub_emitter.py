"""Pub/Sub Event Emitter: publica eventos de domínio no Google Cloud Pub/Sub.

Mapeamento:
    topic lógico  -> topic id `{prefix}{topic}` no projeto GCP
    payload       -> corpo JSON (UTF-8)
    event_type    -> atributo `event_type`
    subject       -> atributo `subject` e ordering key (quando habilitado)

O future de publish é resolvido em thread para não bloquear o event loop.
Nenhum retry é feito aqui além do retry interno do client; falhas sobem
como EventPublishError.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

from utils.errors import EventPublishError

if TYPE_CHECKING:
    from google.cloud.pubsub_v1 import PublisherClient

logger = logging.getLogger(__name__)


class PubSubEventEmitter:
    """Barramento Pub/Sub (implementa EventEmitterProtocol).

    Args:
        publisher: PublisherClient configurado
        project_id: Projeto GCP dos tópicos
        topic_prefix: Prefixo aplicado ao topic id (ex.: "prod-")
        ordering_enabled: Usa subject como ordering key
        publish_timeout_seconds: Timeout para aguardar o ack do publish
    """

    def __init__(
        self,
        publisher: PublisherClient,
        project_id: str,
        *,
        topic_prefix: str = "",
        ordering_enabled: bool = True,
        publish_timeout_seconds: float = 10.0,
    ) -> None:
        self._publisher = publisher
        self._project_id = project_id
        self._topic_prefix = topic_prefix
        self._ordering_enabled = ordering_enabled
        self._publish_timeout_seconds = publish_timeout_seconds

    def topic_path(self, topic: str) -> str:
        """Resolve o caminho completo do tópico no Pub/Sub."""
        return self._publisher.topic_path(self._project_id, f"{self._topic_prefix}{topic}")

    async def emit(
        self,
        topic: str,
        event_type: str,
        subject: str,
        payload: dict[str, Any],
    ) -> None:
        """Publica o evento e aguarda o ack do Pub/Sub.

        Raises:
            EventPublishError: Se serialização ou publish falharem
        """
        topic_path = self.topic_path(topic)
        try:
            data = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise EventPublishError(
                "Payload não serializável", topic=topic, event_type=event_type
            ) from exc

        ordering_key = subject if self._ordering_enabled else ""
        try:
            message_id = await asyncio.to_thread(
                self._publish_sync, topic_path, data, event_type, subject, ordering_key
            )
        except Exception as exc:
            if ordering_key:
                # Publish falho pausa a ordering key até resume explícito
                self._publisher.resume_publish(topic_path, ordering_key)
            raise EventPublishError(
                "Falha ao publicar evento no Pub/Sub", topic=topic, event_type=event_type
            ) from exc

        logger.info(
            "pubsub_event_published",
            extra={"topic": topic, "event_type": event_type, "message_id": message_id},
        )

    def _publish_sync(
        self,
        topic_path: str,
        data: bytes,
        event_type: str,
        subject: str,
        ordering_key: str,
    ) -> str:
        future = self._publisher.publish(
            topic_path,
            data,
            ordering_key=ordering_key,
            event_type=event_type,
            subject=subject,
        )
        return future.result(timeout=self._publish_timeout_seconds)
