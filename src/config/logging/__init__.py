"""Logging estruturado do Rocket Telemetry.

Todo record sai com: timestamp (UTC), level, logger, message, correlation_id,
service (e environment, quando configurado). Campos de conteúdo
(`payload`, `body`, ...) são substituídos por `[redacted]`.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import REDACTED, CorrelationIdFilter, PayloadRedactionFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "PayloadRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
]
