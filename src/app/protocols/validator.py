"""Protocolos de validação de payload inbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.rocket_message import RocketMessage


class ValidationError(ValueError):
    """Erro de validação de payload."""


class RocketMessageDecoderProtocol(Protocol):
    """Contrato mínimo para decodificar o corpo bruto em mensagem tipada."""

    def __call__(self, data: Any) -> RocketMessage: ...
