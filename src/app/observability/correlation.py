"""correlation_id por request, guardado em ContextVar.

O valor vem do header `x-correlation-id` quando é um identificador
aceitável; caso contrário um UUID4 é gerado. Os filters de logging leem
o valor via `get_correlation_id`.

Uso:
    with correlation_scope(request.headers.get(CORRELATION_HEADER)):
        ...
"""

from __future__ import annotations

import re
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

CORRELATION_HEADER = "x-correlation-id"

# Aceita apenas ids curtos e imprimíveis vindos do cliente
_ACCEPTED_ID = re.compile(r"[A-Za-z0-9._:\-]{1,128}")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Valores ausentes ou fora do formato aceito são trocados por um UUID4.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    if correlation_id is None or not _ACCEPTED_ID.fullmatch(correlation_id):
        correlation_id = generate_correlation_id()
    return _correlation_id.set(correlation_id)


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Define o correlation_id durante o bloco e restaura o anterior na saída."""
    token = set_correlation_id(correlation_id)
    try:
        yield _correlation_id.get()
    finally:
        reset_correlation_id(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())
