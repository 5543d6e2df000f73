"""Protocolos e contratos do core da aplicação."""

from .dedupe import AsyncDedupeProtocol, DedupeProtocol
from .event_emitter import EventEmitterProtocol
from .validator import RocketMessageDecoderProtocol, ValidationError

__all__ = [
    "AsyncDedupeProtocol",
    "DedupeProtocol",
    "EventEmitterProtocol",
    "RocketMessageDecoderProtocol",
    "ValidationError",
]
