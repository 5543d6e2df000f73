"""Erros de validação de mensagens de telemetria."""

from __future__ import annotations

from app.protocols.validator import ValidationError


class MessageValidationError(ValidationError):
    """Entrada malformada ("bad request").

    Attributes:
        reason: Descrição legível da primeira regra violada.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class UnknownMessageTypeError(MessageValidationError):
    """messageType sintaticamente válido, mas fora do conjunto aceito."""
