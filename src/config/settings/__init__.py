"""Settings do Rocket Telemetry, carregadas de variáveis de ambiente.

- base: ENVIRONMENT, SERVICE_NAME, DEBUG, LOG_LEVEL, REDIS_URL, GCP_PROJECT
- base.dedupe: DEDUPE_BACKEND, DEDUPE_TTL_SECONDS
- infra.pubsub: EVENT_BUS_BACKEND, PUBSUB_TOPIC_PREFIX, PUBSUB_ORDERING,
  PUBSUB_PUBLISH_TIMEOUT_SECONDS

Cada getter é cacheado (`cache_clear()` em testes).
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    DedupeBackend,
    DedupeSettings,
    Environment,
    get_base_settings,
    get_dedupe_settings,
)
from config.settings.infra import EventBusBackend, PubSubSettings, get_pubsub_settings

__all__ = [
    "BaseSettings",
    "DedupeBackend",
    "DedupeSettings",
    "Environment",
    "EventBusBackend",
    "PubSubSettings",
    "get_base_settings",
    "get_dedupe_settings",
    "get_pubsub_settings",
]
