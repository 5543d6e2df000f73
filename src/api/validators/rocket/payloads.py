"""Validadores de payload por variante (regra 8 do decoder).

Cada validador recebe o bloco `message` bruto, checa os campos da
variante na ordem do contrato e devolve apenas esses campos.
Campos extras são descartados sem erro.
"""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from api.validators.rocket.errors import MessageValidationError
from api.validators.rocket.fields import is_non_negative_number, is_string
from app.constants.rocket import RocketMessageType
from app.domain.rocket_message import (
    MissionChangedPayload,
    RocketExplodedPayload,
    RocketLaunchedPayload,
    RocketPayload,
    SpeedChangePayload,
)

PayloadValidator = Callable[[dict[str, Any]], RocketPayload]


def validate_launched(message: dict[str, Any]) -> RocketLaunchedPayload:
    """Valida RocketLaunched: type, launchSpeed (>= 0), mission."""
    rocket_type = message.get("type")
    if not is_string(rocket_type):
        raise MessageValidationError("Missing or invalid rocket type")

    launch_speed = message.get("launchSpeed")
    if not is_non_negative_number(launch_speed):
        raise MessageValidationError("Missing or invalid launchSpeed")

    mission = message.get("mission")
    if not is_string(mission):
        raise MessageValidationError("Missing or invalid mission")

    return RocketLaunchedPayload(type=rocket_type, launch_speed=launch_speed, mission=mission)


def validate_speed_change(message: dict[str, Any]) -> SpeedChangePayload:
    """Valida RocketSpeedIncreased/RocketSpeedDecreased: by (>= 0)."""
    by = message.get("by")
    if not is_non_negative_number(by):
        raise MessageValidationError("Missing or invalid speed change amount")
    return SpeedChangePayload(by=by)


def validate_exploded(message: dict[str, Any]) -> RocketExplodedPayload:
    reason = message.get("reason")
    if not is_string(reason):
        raise MessageValidationError("Missing or invalid explosion reason")
    return RocketExplodedPayload(reason=reason)


def validate_mission_changed(message: dict[str, Any]) -> MissionChangedPayload:
    new_mission = message.get("newMission")
    if not is_string(new_mission):
        raise MessageValidationError("Missing or invalid new mission")
    return MissionChangedPayload(new_mission=new_mission)


PAYLOAD_VALIDATORS: MappingProxyType[RocketMessageType, PayloadValidator] = MappingProxyType(
    {
        RocketMessageType.LAUNCHED: validate_launched,
        RocketMessageType.SPEED_INCREASED: validate_speed_change,
        RocketMessageType.SPEED_DECREASED: validate_speed_change,
        RocketMessageType.EXPLODED: validate_exploded,
        RocketMessageType.MISSION_CHANGED: validate_mission_changed,
    }
)
