"""Entrypoint do serviço Rocket Telemetry.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app import __version__
from app.bootstrap import (
    get_dedupe_store,
    get_event_emitter,
    get_ingest_use_case,
    initialize_app,
    validate_runtime_settings,
)
from app.bootstrap.clients import create_async_redis_client, create_pubsub_publisher
from config.logging import get_logger
from config.settings import get_dedupe_settings, get_pubsub_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Constrói ledger de dedupe e emitter (uma instância por processo)

    Shutdown:
    - Flush do publisher Pub/Sub
    - Fecha conexões Redis
    """
    logger.info("app_starting", extra={"service": "rocket-telemetry"})
    validate_runtime_settings()

    dedupe_settings = get_dedupe_settings()
    pubsub_settings = get_pubsub_settings()
    app.state.dedupe_backend = dedupe_settings.backend
    app.state.event_bus_backend = pubsub_settings.backend
    app.state.redis_client = None
    app.state.pubsub_publisher = None

    if dedupe_settings.backend == "redis":
        app.state.redis_client = create_async_redis_client()
    if pubsub_settings.backend == "pubsub":
        app.state.pubsub_publisher = create_pubsub_publisher(
            ordering_enabled=pubsub_settings.ordering_enabled
        )

    get_dedupe_store()
    get_event_emitter()
    app.state.ingest_use_case = get_ingest_use_case()

    yield

    logger.info("app_shutting_down", extra={"service": "rocket-telemetry"})
    publisher = app.state.pubsub_publisher
    if publisher is not None:
        # stop() aguarda o envio dos lotes pendentes
        await asyncio.to_thread(publisher.stop)
    redis_client = app.state.redis_client
    if redis_client is not None:
        await redis_client.aclose()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="Rocket Telemetry",
        description="Ingestão, dedupe e publicação de telemetria de foguetes",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "rocket-telemetry"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting Rocket Telemetry in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
