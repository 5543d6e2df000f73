"""Enums e tabelas de domínio para mensagens de telemetria de foguetes."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType

# Tópico fixo no barramento de eventos
ROCKET_EVENT_TOPIC = "rocket"


class RocketMessageType(StrEnum):
    """Tipos de mensagem aceitos em metadata.messageType."""

    LAUNCHED = "RocketLaunched"
    SPEED_INCREASED = "RocketSpeedIncreased"
    SPEED_DECREASED = "RocketSpeedDecreased"
    EXPLODED = "RocketExploded"
    MISSION_CHANGED = "RocketMissionChanged"


class RocketEventType(StrEnum):
    """Tipos de evento publicados no tópico `rocket`."""

    LAUNCHED = "launched"
    SPEED_INCREASED = "speed-increased"
    SPEED_DECREASED = "speed-decreased"
    EXPLODED = "exploded"
    MISSION_CHANGED = "mission-changed"


EVENT_TYPE_BY_MESSAGE_TYPE: MappingProxyType[RocketMessageType, RocketEventType] = (
    MappingProxyType(
        {
            RocketMessageType.LAUNCHED: RocketEventType.LAUNCHED,
            RocketMessageType.SPEED_INCREASED: RocketEventType.SPEED_INCREASED,
            RocketMessageType.SPEED_DECREASED: RocketEventType.SPEED_DECREASED,
            RocketMessageType.EXPLODED: RocketEventType.EXPLODED,
            RocketMessageType.MISSION_CHANGED: RocketEventType.MISSION_CHANGED,
        }
    )
)

VALID_MESSAGE_TYPES = frozenset(str(member) for member in RocketMessageType)
