"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="rocket_telemetry")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("rocket_event_emitted", extra={"event_type": "launched"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, PayloadRedactionFilter
from config.logging.formatters import create_json_formatter, create_text_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "rocket_telemetry"

# Bibliotecas de transporte ficam em WARNING mesmo com DEBUG no serviço
_NOISY_LOGGERS = ("google.cloud.pubsub_v1", "google.api_core", "urllib3", "httpx")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    *,
    environment: str | None = None,
    json_output: bool = True,
) -> None:
    """Instala um único handler no root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case insensitive).
        service_name: Valor do campo `service`.
        correlation_id_getter: Lê o correlation_id do request atual.
        environment: Valor do campo `environment`, se informado.
        json_output: False usa formato texto (dev/testes).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_name = level.upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_name)
    handler.setFormatter(create_json_formatter() if json_output else create_text_formatter())
    handler.addFilter(
        CorrelationIdFilter(service_name, correlation_id_getter, environment=environment)
    )
    handler.addFilter(PayloadRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_name)
    root.handlers = [handler]

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
