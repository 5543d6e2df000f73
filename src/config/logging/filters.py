"""Filters de logging: contexto do request e redação de conteúdo.

- CorrelationIdFilter: injeta correlation_id, service e environment
- PayloadRedactionFilter: troca conteúdo de mensagem por marcador

Logs carregam apenas identificadores (channel, sequence, event_type);
o corpo da telemetria nunca é escrito.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "[redacted]"

# Atributos de record que podem carregar conteúdo de mensagem
REDACTED_FIELDS = frozenset({"payload", "body", "raw_body", "message_body", "metadata"})


class CorrelationIdFilter(logging.Filter):
    """Enriquece cada record com o contexto do serviço.

    Args:
        service_name: Nome do serviço (campo `service`).
        correlation_id_getter: Lê o correlation_id do contexto atual.
        environment: Ambiente de execução (campo `environment`), opcional.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        *,
        environment: str | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter
        self._environment = environment

    def _current_correlation_id(self) -> str:
        if self._correlation_id_getter is None:
            return ""
        return self._correlation_id_getter()

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id explícito via `extra` tem precedência
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._current_correlation_id()
        record.service = self._service_name
        if self._environment is not None:
            record.environment = self._environment
        return True


class PayloadRedactionFilter(logging.Filter):
    """Substitui campos de conteúdo passados via `extra` por REDACTED.

    Nunca descarta o record; apenas reescreve os atributos listados.
    """

    def __init__(self, fields: Iterable[str] = REDACTED_FIELDS) -> None:
        super().__init__()
        self._fields = frozenset(fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for field in self._fields.intersection(record.__dict__):
            record.__dict__[field] = REDACTED
        return True
