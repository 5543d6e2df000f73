"""Validação do envelope e dos metadados (regras 1 a 7 do decoder)."""

from __future__ import annotations

from typing import Any

from api.validators.rocket.errors import MessageValidationError, UnknownMessageTypeError
from api.validators.rocket.fields import is_non_empty_string, is_number, is_object
from app.constants.rocket import VALID_MESSAGE_TYPES, RocketMessageType
from app.domain.rocket_message import MessageMetadata


def validate_envelope(data: Any) -> tuple[dict[str, Any], dict[str, Any]]:
    """Valida o envelope `{metadata, message}`.

    Args:
        data: Corpo já desserializado (qualquer shape, inclusive None)

    Raises:
        MessageValidationError: Se o envelope ou um dos blocos não for objeto

    Returns:
        (metadata bruto, message bruto)
    """
    if not is_object(data):
        raise MessageValidationError("Body must be a JSON object")

    metadata = data.get("metadata")
    if not is_object(metadata):
        raise MessageValidationError("Missing or invalid metadata")

    message = data.get("message")
    if not is_object(message):
        raise MessageValidationError("Missing or invalid message")

    return metadata, message


def validate_metadata(metadata: dict[str, Any]) -> tuple[MessageMetadata, RocketMessageType]:
    """Valida campos de metadata na ordem canônica.

    Raises:
        MessageValidationError: Campo ausente ou com tipo inválido
        UnknownMessageTypeError: messageType fora do conjunto aceito

    Returns:
        (MessageMetadata, RocketMessageType)
    """
    channel = metadata.get("channel")
    if not is_non_empty_string(channel):
        raise MessageValidationError("Missing or invalid channel")

    message_number = metadata.get("messageNumber")
    if not is_number(message_number):
        raise MessageValidationError("Missing or invalid messageNumber")

    message_time = metadata.get("messageTime")
    if not is_non_empty_string(message_time):
        raise MessageValidationError("Missing or invalid messageTime")

    message_type = metadata.get("messageType")
    if not is_non_empty_string(message_type):
        raise MessageValidationError("Invalid messageType")
    if message_type not in VALID_MESSAGE_TYPES:
        raise UnknownMessageTypeError("Invalid messageType")

    return (
        MessageMetadata(
            channel=channel,
            message_number=message_number,
            message_time=message_time,
        ),
        RocketMessageType(message_type),
    )
