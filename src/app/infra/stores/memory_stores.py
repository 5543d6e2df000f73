"""Stores em memória para desenvolvimento e instância única.

ATENÇÃO: Sem persistência entre reinícios e sem compartilhamento entre
processos. Em staging/production com mais de uma réplica, usar Redis.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

from app.protocols.dedupe import AsyncDedupeProtocol, DedupeProtocol, Sequence

if TYPE_CHECKING:
    from collections.abc import Iterator


class MemoryDedupeStore(DedupeProtocol, AsyncDedupeProtocol):
    """Ledger de dedupe em memória: channel -> conjunto de sequências vistas.

    Cada canal tem seu próprio lock, então canais diferentes não se bloqueiam.
    O registro de locks por canal é protegido por um lock global curto.

    Com TTL, canais expirados são varridos no máximo uma vez por período de
    TTL (junto com seus locks), então canais que nunca voltam não acumulam.

    Args:
        ttl_seconds: Expira o canal inteiro após N segundos sem novas
            sequências. 0 (padrão) nunca expira.
    """

    def __init__(self, ttl_seconds: int = 0) -> None:
        self._ttl_seconds = ttl_seconds
        self._seen: dict[str, set[Sequence]] = {}
        self._expires_at: dict[str, float] = {}
        self._channel_locks: dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()
        self._next_sweep_at = 0.0

    def __len__(self) -> int:
        """Quantidade de canais retidos no ledger."""
        with self._registry_lock:
            return len(self._seen)

    @contextmanager
    def _channel(self, channel: str) -> Iterator[None]:
        # Um lock removido pela varredura entre o lookup e o acquire não vale
        # mais: tenta de novo com o lock atual do registro
        while True:
            with self._registry_lock:
                lock = self._channel_locks.setdefault(channel, threading.Lock())
            lock.acquire()
            with self._registry_lock:
                if self._channel_locks.get(channel) is lock:
                    break
            lock.release()
        try:
            yield
        finally:
            lock.release()

    def _sweep_expired(self, now: float) -> None:
        """Remove canais expirados e locks órfãos ociosos."""
        with self._registry_lock:
            if now < self._next_sweep_at:
                return
            self._next_sweep_at = now + self._ttl_seconds
            for channel, lock in list(self._channel_locks.items()):
                expires_at = self._expires_at.get(channel)
                stale = channel not in self._seen or (
                    expires_at is not None and expires_at <= now
                )
                # Canal em uso por outra thread fica para a próxima varredura
                if not stale or not lock.acquire(blocking=False):
                    continue
                try:
                    self._seen.pop(channel, None)
                    self._expires_at.pop(channel, None)
                    del self._channel_locks[channel]
                finally:
                    lock.release()

    def _expire_if_needed(self, channel: str, now: float) -> None:
        """Descarta o canal expirado. Chamado com o lock do canal adquirido."""
        expires_at = self._expires_at.get(channel)
        if expires_at is not None and expires_at <= now:
            self._seen.pop(channel, None)
            self._expires_at.pop(channel, None)

    def seen(self, channel: str, sequence: Sequence) -> bool:
        """Verifica e registra o par atomicamente (sync)."""
        if self._ttl_seconds > 0:
            self._sweep_expired(time.monotonic())
        with self._channel(channel):
            now = time.monotonic()
            if self._ttl_seconds > 0:
                self._expire_if_needed(channel, now)
            sequences = self._seen.setdefault(channel, set())
            if sequence in sequences:
                return True  # Duplicado
            sequences.add(sequence)
            if self._ttl_seconds > 0:
                self._expires_at[channel] = now + self._ttl_seconds
            return False  # Novo

    async def seen_async(self, channel: str, sequence: Sequence) -> bool:
        """Verifica e registra o par atomicamente (async wrapper)."""
        return self.seen(channel, sequence)

    def sequences_for(self, channel: str) -> frozenset[Sequence]:
        """Retorna as sequências registradas do canal (apenas para testes)."""
        with self._channel(channel):
            return frozenset(self._seen.get(channel, ()))
