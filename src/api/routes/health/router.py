"""Endpoints de health check para Cloud Run."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app import __version__
from config.settings import get_base_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = __version__


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    backend: str
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "backend": self.backend,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: ledger de dedupe e barramento de eventos."""
    state = request.app.state
    ledger_check = await _check_ledger(
        getattr(state, "dedupe_backend", "memory"),
        getattr(state, "redis_client", None),
    )
    event_bus_check = _check_event_bus(
        getattr(state, "event_bus_backend", "memory"),
        getattr(state, "pubsub_publisher", None),
    )

    ready = ledger_check.status == "ok" and event_bus_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "ledger": ledger_check.as_dict(),
            "event_bus": event_bus_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_ledger(backend: str, redis_client: Any | None) -> DependencyCheck:
    if backend != "redis":
        return DependencyCheck(status="ok", backend=backend)
    if redis_client is None:
        return DependencyCheck(status="failed", backend=backend, error="not_configured")
    started_at = time.perf_counter()
    try:
        await asyncio.wait_for(redis_client.ping(), timeout=2.0)
    except TimeoutError:
        return DependencyCheck(status="failed", backend=backend, error="timeout")
    except Exception as exc:
        logger.warning("readiness_redis_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", backend=backend, error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", backend=backend, latency_ms=round(latency_ms, 2))


def _check_event_bus(backend: str, publisher: Any | None) -> DependencyCheck:
    if backend != "pubsub":
        return DependencyCheck(status="ok", backend=backend)
    if publisher is None:
        return DependencyCheck(status="failed", backend=backend, error="not_configured")
    return DependencyCheck(status="ok", backend=backend)
