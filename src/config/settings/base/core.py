"""Settings base do Rocket Telemetry.

Ambiente, identificação do serviço, nível de log e endpoints de
infraestrutura compartilhados (Redis do ledger, projeto GCP do barramento).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do serviço.

    Attributes:
        environment: development|staging|production
        service_name: Nome do serviço (health, logs)
        debug: Modo debug ativo
        log_level: Nível do root logger
        gcp_project: Projeto GCP dos tópicos Pub/Sub
        redis_url: URL do Redis usado pelo ledger de dedupe
    """

    environment: Environment = "development"
    service_name: str = "rocket-telemetry"
    debug: bool = False
    log_level: str = "INFO"
    gcp_project: str = ""
    redis_url: str = ""

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_strict(self) -> bool:
        """Ambientes onde configuração inválida impede o boot."""
        return self.environment in ("staging", "production")

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.environment not in ("development", "staging", "production"):
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.log_level.upper() not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        return errors


def _parse_environment(raw: str) -> Environment:
    # Valores desconhecidos caem em development
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "rocket-telemetry"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        gcp_project=os.getenv("GCP_PROJECT", os.getenv("GOOGLE_CLOUD_PROJECT", "")),
        redis_url=os.getenv("REDIS_URL", ""),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
