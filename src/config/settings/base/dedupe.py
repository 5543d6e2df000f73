"""Settings do ledger de dedupe (chave: channel + messageNumber)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

DedupeBackend = Literal["memory", "redis"]

_BACKENDS: tuple[DedupeBackend, ...] = ("memory", "redis")


@dataclass(frozen=True)
class DedupeSettings:
    """Configuração do ledger.

    Attributes:
        backend: memory (processo único) ou redis (compartilhado entre réplicas)
        ttl_seconds: Expiração do canal após a última sequência nova.
            0 nunca expira; -1 indica valor de ambiente ilegível.
    """

    backend: DedupeBackend = "memory"
    ttl_seconds: int = 0

    @property
    def expires(self) -> bool:
        return self.ttl_seconds > 0

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida o ledger contra o ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in _BACKENDS:
            errors.append(f"DEDUPE_BACKEND inválido: {self.backend}")
        elif self.backend == "memory" and not base.is_development:
            # Ledger em memória não é compartilhado entre réplicas
            errors.append("DEDUPE_BACKEND=memory proibido em staging/production. Use Redis.")
        elif self.backend == "redis" and not base.redis_url:
            errors.append("DEDUPE_BACKEND=redis requer REDIS_URL configurado")

        if self.ttl_seconds < 0:
            errors.append("DEDUPE_TTL_SECONDS deve ser um inteiro >= 0")

        return errors


def _parse_ttl(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        return -1


def _load_dedupe_from_env() -> DedupeSettings:
    backend = os.getenv("DEDUPE_BACKEND", "memory").strip().lower()
    return DedupeSettings(
        backend=backend if backend in _BACKENDS else "memory",  # type: ignore[arg-type]
        ttl_seconds=_parse_ttl(os.getenv("DEDUPE_TTL_SECONDS", "0")),
    )


@lru_cache(maxsize=1)
def get_dedupe_settings() -> DedupeSettings:
    """Retorna instância cacheada de DedupeSettings."""
    return _load_dedupe_from_env()
