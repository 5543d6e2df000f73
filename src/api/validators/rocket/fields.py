"""Checagens primitivas de tipo compartilhadas pelos validadores.

Seguem a semântica JSON: booleanos não são números e números
precisam ser finitos e representáveis como float (json.loads aceita
NaN/Infinity e inteiros arbitrariamente grandes).
"""

from __future__ import annotations

import math
from typing import Any


def is_object(value: Any) -> bool:
    return isinstance(value, dict)


def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int grande demais para float (ex.: 10**400 vindo do JSON)
        return False


def is_non_negative_number(value: Any) -> bool:
    return is_number(value) and value >= 0


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value)
