"""Parse inicial do corpo de POST /messages (sem PII).

Apenas JSON malformado ou inconversível (ex.: inteiro acima do limite de
dígitos do interpretador) é tratado aqui; qualquer valor JSON válido
(inclusive null, lista ou string) segue para o decoder, que classifica
o shape.
"""

from __future__ import annotations

import json
from typing import Any


class InvalidJsonError(ValueError):
    """JSON inválido no corpo do request."""


def parse_message_body(raw_body: bytes) -> Any:
    """Desserializa o corpo bruto.

    Args:
        raw_body: Corpo bruto do request

    Raises:
        InvalidJsonError: Se o corpo estiver vazio ou não for JSON válido

    Returns:
        Valor JSON desserializado
    """
    if not raw_body:
        raise InvalidJsonError("empty_body")
    try:
        return json.loads(raw_body)
    except ValueError as exc:
        # JSONDecodeError, UnicodeDecodeError e inteiros acima do limite de dígitos
        raise InvalidJsonError("invalid_json") from exc
