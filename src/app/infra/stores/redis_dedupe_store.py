"""Redis Dedupe Store: ledger de dedupe compartilhado entre réplicas.

Cada canal é um SET Redis; SADD retorna 1 apenas na primeira inserção do
membro, então verificação e registro são uma única operação atômica no
servidor, sem janela de corrida entre requests concorrentes.

Contrato de Keys:
    `dedupe:rocket:{channel}`, membro = sequência canônica (ver
    `canonical_sequence`). Channel é um identificador opaco (ex.: UUID).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.dedupe import AsyncDedupeProtocol, DedupeProtocol, Sequence
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis import Redis
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

# Prefixo para namespace de dedupe
DEDUPE_PREFIX = "dedupe:rocket:"

# SADD + EXPIRE no mesmo script: o servidor executa os dois sem intercalar
# outros comandos e o TTL nunca falha separado do registro
_SADD_WITH_TTL = """
local added = redis.call('SADD', KEYS[1], ARGV[1])
if added == 1 then
    redis.call('EXPIRE', KEYS[1], tonumber(ARGV[2]))
end
return added
"""


def canonical_sequence(sequence: Sequence) -> str:
    """Serializa a sequência de forma estável (4 e 4.0 geram o mesmo membro)."""
    if isinstance(sequence, float) and sequence.is_integer():
        return str(int(sequence))
    return repr(sequence)


class RedisDedupeStore(DedupeProtocol, AsyncDedupeProtocol):
    """Ledger de dedupe usando Redis (Upstash compatível).

    Args:
        redis_client: Cliente Redis síncrono (opcional, usado por `seen`)
        async_redis_client: Cliente Redis assíncrono (usado pela ingestão)
        ttl_seconds: TTL do SET do canal, renovado a cada sequência nova.
            0 (padrão) nunca expira.
    """

    def __init__(
        self,
        redis_client: Redis[bytes] | None = None,
        async_redis_client: AsyncRedis[bytes] | None = None,
        ttl_seconds: int = 0,
    ) -> None:
        self._redis = redis_client
        self._async_redis = async_redis_client
        self._ttl_seconds = ttl_seconds

    def _key(self, channel: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{DEDUPE_PREFIX}{channel}"

    # ──────────────────────────────────────────────────────────────
    # Sync API (DedupeProtocol)
    # ──────────────────────────────────────────────────────────────

    def seen(self, channel: str, sequence: Sequence) -> bool:
        """Verifica e registra o par atomicamente (SADD, ou script com EXPIRE).

        Returns:
            True se duplicado, False se novo
        """
        if self._redis is None:
            msg = "Sync Redis client não configurado"
            raise RuntimeError(msg)

        redis_key = self._key(channel)
        member = canonical_sequence(sequence)
        try:
            if self._ttl_seconds > 0:
                added = self._redis.eval(
                    _SADD_WITH_TTL, 1, redis_key, member, str(self._ttl_seconds)
                )
            else:
                added = self._redis.sadd(redis_key, member)
        except Exception as exc:
            raise RedisConnectionError("Falha ao registrar dedupe no Redis") from exc
        return self._log_result(channel, member, added)

    # ──────────────────────────────────────────────────────────────
    # Async API (AsyncDedupeProtocol)
    # ──────────────────────────────────────────────────────────────

    async def seen_async(self, channel: str, sequence: Sequence) -> bool:
        """Versão async de `seen`.

        Returns:
            True se duplicado, False se novo
        """
        if self._async_redis is None:
            msg = "Async Redis client não configurado"
            raise RuntimeError(msg)

        redis_key = self._key(channel)
        member = canonical_sequence(sequence)
        try:
            if self._ttl_seconds > 0:
                added = await self._async_redis.eval(
                    _SADD_WITH_TTL, 1, redis_key, member, str(self._ttl_seconds)
                )
            else:
                added = await self._async_redis.sadd(redis_key, member)
        except Exception as exc:
            raise RedisConnectionError("Falha ao registrar dedupe no Redis") from exc
        return self._log_result(channel, member, added)

    def _log_result(self, channel: str, member: str, added: int) -> bool:
        is_duplicate = not added
        if is_duplicate:
            channel_masked = channel[:8] + "..." if len(channel) > 8 else channel
            logger.debug(
                "dedupe_duplicate_detected",
                extra={"channel": channel_masked, "sequence": member},
            )
        return is_duplicate
