"""Factories de stores, emitters e use cases baseadas em configuração.

Este módulo centraliza a criação das implementações concretas
conectadas aos protocolos do core.
"""

from __future__ import annotations

import logging

from app.bootstrap.clients import (
    create_async_redis_client,
    create_pubsub_publisher,
)
from app.infra.events import MemoryEventEmitter, PubSubEventEmitter
from app.infra.stores import MemoryDedupeStore, RedisDedupeStore
from app.protocols.dedupe import AsyncDedupeProtocol, DedupeProtocol
from app.protocols.event_emitter import EventEmitterProtocol
from app.use_cases.rocket import DispatchRocketEventUseCase, IngestRocketMessageUseCase
from config.settings import get_base_settings, get_dedupe_settings, get_pubsub_settings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Dedupe Ledger Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_dedupe_store() -> DedupeProtocol:
    """Cria ledger de dedupe baseado na configuração.

    Lê DEDUPE_BACKEND:
    - "memory": MemoryDedupeStore (dev / instância única)
    - "redis": RedisDedupeStore (staging/production)
    """
    settings = get_dedupe_settings()

    if settings.backend == "redis":
        # Ingestão usa apenas a API async; sem cliente async o boot falha
        store = RedisDedupeStore(
            async_redis_client=create_async_redis_client(),
            ttl_seconds=settings.ttl_seconds,
        )
        logger.info(
            "dedupe_store_created",
            extra={"backend": "redis", "expires": settings.expires},
        )
        return store

    if settings.backend == "memory":
        environment = get_base_settings().environment
        if environment != "development":
            logger.warning(
                "memory_dedupe_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        store = MemoryDedupeStore(ttl_seconds=settings.ttl_seconds)
        logger.info(
            "dedupe_store_created",
            extra={"backend": "memory", "expires": settings.expires},
        )
        return store

    msg = f"DEDUPE_BACKEND inválido: {settings.backend}"
    raise ValueError(msg)


def create_async_dedupe_store() -> AsyncDedupeProtocol:
    """Cria ledger de dedupe assíncrono."""
    store = create_dedupe_store()
    if not isinstance(store, AsyncDedupeProtocol):
        msg = "Store não suporta operações assíncronas"
        raise TypeError(msg)
    return store


# ──────────────────────────────────────────────────────────────────────────────
# Event Emitter Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_event_emitter() -> EventEmitterProtocol:
    """Cria emitter do barramento baseado na configuração.

    Lê EVENT_BUS_BACKEND:
    - "memory": MemoryEventEmitter (dev/test)
    - "pubsub": PubSubEventEmitter (staging/production)
    """
    settings = get_pubsub_settings()

    if settings.backend == "pubsub":
        emitter = PubSubEventEmitter(
            create_pubsub_publisher(ordering_enabled=settings.ordering_enabled),
            get_base_settings().gcp_project,
            topic_prefix=settings.topic_prefix,
            ordering_enabled=settings.ordering_enabled,
            publish_timeout_seconds=settings.publish_timeout_seconds,
        )
        logger.info("event_emitter_created", extra={"backend": "pubsub"})
        return emitter

    if settings.backend == "memory":
        logger.info("event_emitter_created", extra={"backend": "memory"})
        return MemoryEventEmitter()

    msg = f"EVENT_BUS_BACKEND inválido: {settings.backend}"
    raise ValueError(msg)


# ──────────────────────────────────────────────────────────────────────────────
# Use Case Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_ingest_use_case(
    *,
    dedupe: AsyncDedupeProtocol,
    emitter: EventEmitterProtocol,
) -> IngestRocketMessageUseCase:
    """Conecta ledger e emitter ao use case de ingestão."""
    dispatcher = DispatchRocketEventUseCase(dedupe=dedupe, emitter=emitter)
    return IngestRocketMessageUseCase(dispatcher=dispatcher)
