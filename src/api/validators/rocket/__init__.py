"""Validadores de mensagens de telemetria de foguetes.

Uso:
    from api.validators.rocket import MessageValidationError, decode_rocket_message

    try:
        message = decode_rocket_message(body)
    except MessageValidationError as exc:
        ...  # 400 com exc.reason
"""

from api.validators.rocket.decoder import decode_rocket_message, ensure_variant_tables_complete
from api.validators.rocket.errors import MessageValidationError, UnknownMessageTypeError

__all__ = [
    "MessageValidationError",
    "UnknownMessageTypeError",
    "decode_rocket_message",
    "ensure_variant_tables_complete",
]
