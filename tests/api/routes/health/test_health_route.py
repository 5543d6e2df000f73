"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_check_is_healthy() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service == "rocket-telemetry"


@pytest.mark.asyncio
async def test_readiness_is_ready_with_memory_backends() -> None:
    request = _build_request_with_state(
        SimpleNamespace(dedupe_backend="memory", event_bus_backend="memory")
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["ledger"]["backend"] == "memory"
    assert payload["checks"]["event_bus"]["backend"] == "memory"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_dependencies() -> None:
    request = _build_request_with_state(
        SimpleNamespace(
            dedupe_backend="redis",
            event_bus_backend="pubsub",
            redis_client=None,
            pubsub_publisher=None,
        )
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["ledger"]["status"] == "failed"
    assert payload["checks"]["ledger"]["error"] == "not_configured"
    assert payload["checks"]["event_bus"]["status"] == "failed"


@pytest.mark.asyncio
async def test_readiness_returns_ready_when_dependencies_are_ok() -> None:
    redis_client = MagicMock()
    redis_client.ping = AsyncMock(return_value=True)

    request = _build_request_with_state(
        SimpleNamespace(
            dedupe_backend="redis",
            event_bus_backend="pubsub",
            redis_client=redis_client,
            pubsub_publisher=MagicMock(),
        )
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["ledger"]["status"] == "ok"
    assert payload["checks"]["ledger"]["latency_ms"] is not None
    assert payload["checks"]["event_bus"]["status"] == "ok"


@pytest.mark.asyncio
async def test_readiness_reports_redis_ping_failure() -> None:
    redis_client = MagicMock()
    redis_client.ping = AsyncMock(side_effect=ConnectionError("refused"))

    request = _build_request_with_state(
        SimpleNamespace(dedupe_backend="redis", redis_client=redis_client)
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["ledger"]["error"] == "ConnectionError"
