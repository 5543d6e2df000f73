"""Formatters de logging.

JSON em staging/production (um objeto por linha, lido pelo Cloud Logging)
e texto simples em desenvolvimento. Ambos carregam correlation_id e service,
injetados pelos filters do handler.
"""

from __future__ import annotations

import logging
import time

from pythonjsonlogger.json import JsonFormatter

# Campos que todo record JSON precisa expor
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}

# ISO-8601 em UTC; o sufixo Z depende do converter gmtime
ISO_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(service)s] %(name)s cid=%(correlation_id)s %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON com nomes de campo estáveis.

    Exemplo:
        {"timestamp": "2026-02-02T10:30:00Z", "level": "INFO",
         "logger": "app.use_cases.rocket.dispatch_rocket_event",
         "message": "rocket_event_emitted", "correlation_id": "abc-123",
         "service": "rocket-telemetry", "event_type": "launched"}
    """
    formatter = JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        datefmt=ISO_DATE_FORMAT,
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
    formatter.converter = time.gmtime
    return formatter


def create_text_formatter() -> logging.Formatter:
    formatter = logging.Formatter(TEXT_FORMAT, datefmt=ISO_DATE_FORMAT)
    formatter.converter = time.gmtime
    return formatter
