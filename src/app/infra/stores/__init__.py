"""Stores: implementações concretas do ledger de dedupe.

Módulos disponíveis:
    - redis_dedupe_store: Ledger de dedupe usando Redis (Upstash)
    - memory_stores: Ledger em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryDedupeStore
from app.infra.stores.redis_dedupe_store import RedisDedupeStore, canonical_sequence

__all__ = [
    # Memory (dev/test)
    "MemoryDedupeStore",
    # Redis (Upstash)
    "RedisDedupeStore",
    "canonical_sequence",
]
