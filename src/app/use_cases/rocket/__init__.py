"""Use cases de telemetria de foguetes."""

from app.use_cases.rocket.dispatch_rocket_event import (
    DispatchResult,
    DispatchRocketEventUseCase,
)
from app.use_cases.rocket.ingest_rocket_message import IngestRocketMessageUseCase

__all__ = [
    "DispatchResult",
    "DispatchRocketEventUseCase",
    "IngestRocketMessageUseCase",
]
