"""Decoder de mensagens de telemetria (união discriminada por messageType).

Fluxo:
1. Envelope: corpo, metadata e message precisam ser objetos
2. Metadata: channel, messageNumber, messageTime, messageType (nesta ordem)
3. Payload: regras da variante resolvida

A primeira regra violada interrompe a validação; não há sucesso parcial.
Função pura, sem efeitos colaterais.
"""

from __future__ import annotations

from typing import Any

from api.validators.rocket.envelope import validate_envelope, validate_metadata
from api.validators.rocket.payloads import PAYLOAD_VALIDATORS
from app.constants.rocket import EVENT_TYPE_BY_MESSAGE_TYPE, RocketMessageType
from app.domain.rocket_message import RocketMessage


def decode_rocket_message(data: Any) -> RocketMessage:
    """Decodifica o corpo bruto em RocketMessage imutável.

    Args:
        data: Corpo desserializado do request (qualquer shape)

    Raises:
        MessageValidationError: Primeira regra violada (com `reason`)
        UnknownMessageTypeError: messageType não reconhecido

    Returns:
        Mensagem tipada com apenas os campos da variante
    """
    raw_metadata, raw_message = validate_envelope(data)
    metadata, message_type = validate_metadata(raw_metadata)
    payload = PAYLOAD_VALIDATORS[message_type](raw_message)
    return RocketMessage(metadata=metadata, message_type=message_type, payload=payload)


def ensure_variant_tables_complete() -> None:
    """Falha se alguma variante não tiver regra de payload ou tipo de evento."""
    variants = set(RocketMessageType)
    missing_rules = variants - set(PAYLOAD_VALIDATORS)
    missing_events = variants - set(EVENT_TYPE_BY_MESSAGE_TYPE)
    if missing_rules or missing_events:
        raise RuntimeError(
            "Tabelas de variantes incompletas: "
            f"sem regra de payload={sorted(missing_rules)}, "
            f"sem tipo de evento={sorted(missing_events)}"
        )


ensure_variant_tables_complete()
