"""Registro de métricas via structured logging.

As métricas são logs estruturados com `metric_type` e podem ser agregadas
depois (Cloud Logging, BigQuery etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Outcome: contador de resultados da ingestão (accepted, duplicate,
  rejected, publish_failed) por tipo de mensagem

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("ingest", "dispatch", (time.perf_counter() - start) * 1000)
    record_ingest_outcome("accepted", message_type="RocketLaunched")
"""

from __future__ import annotations

import logging
from typing import Literal

logger = logging.getLogger(__name__)

IngestOutcome = Literal["accepted", "duplicate", "rejected", "publish_failed"]


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "ingest")
        operation: Nome da operação (ex: "decode", "dispatch")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_ingest_outcome(
    outcome: IngestOutcome,
    message_type: str | None = None,
    correlation_id: str | None = None,
) -> None:
    """Registra o resultado de uma ingestão.

    Args:
        outcome: accepted|duplicate|rejected|publish_failed
        message_type: Tipo da mensagem, quando já resolvido
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_ingest_outcome",
        extra={
            "metric_type": "counter",
            "component": "ingest",
            "outcome": outcome,
            "message_type": message_type,
            "correlation_id": correlation_id,
        },
    )
