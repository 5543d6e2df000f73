"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
constrói uma única vez por processo o ledger de dedupe e o emitter, que
são injetados no use case de ingestão.

Uso:
    from app.bootstrap import initialize_app, get_ingest_use_case

    initialize_app()
    use_case = get_ingest_use_case()
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_dedupe_settings, get_pubsub_settings

# Nome do serviço para logs e métricas
SERVICE_NAME = "rocket_telemetry"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço. LOG_LEVEL inválido
    falha aqui, antes de qualquer request.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        environment=base.environment,
        json_output=not base.debug,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    strict_mode = base.is_strict
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"dedupe: {error}" for error in get_dedupe_settings().validate(base))
    errors.extend(f"event_bus: {error}" for error in get_pubsub_settings().validate(base))

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache, uma instância por processo)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_dedupe_store():
    """Obtém ledger de dedupe assíncrono (singleton)."""
    from app.bootstrap.dependencies import create_async_dedupe_store

    return create_async_dedupe_store()


@lru_cache(maxsize=1)
def get_event_emitter():
    """Obtém emitter do barramento (singleton)."""
    from app.bootstrap.dependencies import create_event_emitter

    return create_event_emitter()


@lru_cache(maxsize=1)
def get_ingest_use_case():
    """Obtém use case de ingestão com ledger e emitter compartilhados."""
    from app.bootstrap.dependencies import create_ingest_use_case

    return create_ingest_use_case(dedupe=get_dedupe_store(), emitter=get_event_emitter())
