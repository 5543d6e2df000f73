"""Clientes externos do ledger (Redis) e do barramento (Pub/Sub).

Cada factory é cacheada: o processo inteiro compartilha um pool Redis async e
um PublisherClient. Imports das bibliotecas são tardios para que o modo
`memory` não dependa delas em runtime.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from config.settings import get_base_settings

if TYPE_CHECKING:
    from google.cloud.pubsub_v1 import PublisherClient
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

# SADD/EVAL é uma única ida ao servidor; timeouts curtos liberam o request cedo
_REDIS_OPTIONS: dict[str, Any] = {
    "decode_responses": False,
    "socket_timeout": 5.0,
    "socket_connect_timeout": 5.0,
    "health_check_interval": 30,
}


def _require_redis_url() -> str:
    redis_url = get_base_settings().redis_url
    if not redis_url:
        msg = "REDIS_URL não configurado"
        raise ValueError(msg)
    return redis_url


@lru_cache(maxsize=1)
def create_async_redis_client() -> AsyncRedis[bytes]:
    """Cliente Redis assíncrono (singleton), usado pela ingestão e pelo /ready.

    Raises:
        ValueError: Se REDIS_URL não configurado
    """
    from redis.asyncio import Redis as AsyncRedis

    client: AsyncRedis[bytes] = AsyncRedis.from_url(_require_redis_url(), **_REDIS_OPTIONS)
    host = client.connection_pool.connection_kwargs.get("host", "unknown")
    logger.info("redis_client_created", extra={"host": host, "mode": "async"})
    return client


@lru_cache(maxsize=1)
def create_pubsub_publisher(*, ordering_enabled: bool = True) -> PublisherClient:
    """PublisherClient do Pub/Sub (singleton).

    Args:
        ordering_enabled: Habilita ordering keys (ordem por channel)
    """
    from google.cloud import pubsub_v1

    client = pubsub_v1.PublisherClient(
        publisher_options=pubsub_v1.types.PublisherOptions(
            enable_message_ordering=ordering_enabled,
        )
    )
    logger.info("pubsub_publisher_created", extra={"ordering_enabled": ordering_enabled})
    return client
