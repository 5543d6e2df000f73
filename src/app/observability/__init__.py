"""Observabilidade: correlation_id por request e métricas via logs.

Uso:
    from app.observability import correlation_scope, record_ingest_outcome
"""

from app.observability.correlation import (
    CORRELATION_HEADER,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    IngestOutcome,
    record_ingest_outcome,
    record_latency,
)

__all__ = [
    "CORRELATION_HEADER",
    "IngestOutcome",
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "record_ingest_outcome",
    "record_latency",
    "reset_correlation_id",
    "set_correlation_id",
]
