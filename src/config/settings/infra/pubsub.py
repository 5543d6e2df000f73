"""Settings do barramento de eventos (Pub/Sub).

Configurações para Google Cloud Pub/Sub.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

EventBusBackend = Literal["memory", "pubsub"]


@dataclass(frozen=True)
class PubSubSettings:
    """Configurações do barramento de eventos.

    Attributes:
        backend: Backend do barramento (memory|pubsub)
        topic_prefix: Prefixo do topic id (ex.: "staging-" -> "staging-rocket")
        ordering_enabled: Usa subject (channel) como ordering key
        publish_timeout_seconds: Timeout para ack do publish
    """

    backend: EventBusBackend = "memory"
    topic_prefix: str = ""
    ordering_enabled: bool = True
    publish_timeout_seconds: float = 10.0

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações do barramento.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in {"memory", "pubsub"}:
            errors.append(f"EVENT_BUS_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append(
                "EVENT_BUS_BACKEND=memory proibido em staging/production. Use Pub/Sub."
            )

        if self.backend == "pubsub" and not base.gcp_project:
            errors.append("EVENT_BUS_BACKEND=pubsub requer GCP_PROJECT configurado")

        if self.publish_timeout_seconds <= 0:
            errors.append("PUBSUB_PUBLISH_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_pubsub_from_env() -> PubSubSettings:
    """Carrega PubSubSettings de variáveis de ambiente."""
    backend_str = os.getenv("EVENT_BUS_BACKEND", "memory").lower()
    backend: EventBusBackend = backend_str if backend_str in ("memory", "pubsub") else "memory"
    return PubSubSettings(
        backend=backend,
        topic_prefix=os.getenv("PUBSUB_TOPIC_PREFIX", ""),
        ordering_enabled=os.getenv("PUBSUB_ORDERING", "true").lower() in ("true", "1"),
        publish_timeout_seconds=float(os.getenv("PUBSUB_PUBLISH_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_pubsub_settings() -> PubSubSettings:
    """Retorna instância cacheada de PubSubSettings."""
    return _load_pubsub_from_env()
