"""Modelos de domínio para mensagens de telemetria já validadas.

Os modelos são imutáveis e só são construídos pelo decoder
(`api.validators.rocket`), depois que todas as regras de shape passaram.
Os aliases preservam os nomes camelCase do contrato de entrada/saída.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.constants.rocket import RocketMessageType

Number = int | float


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    def to_event_payload(self) -> dict[str, Any]:
        """Serializa campos do payload com nomes do contrato (camelCase)."""
        return self.model_dump(by_alias=True)


class MessageMetadata(_FrozenModel):
    """Metadados comuns a toda mensagem (canal, sequência e horário)."""

    channel: str = Field(..., min_length=1)
    message_number: Number = Field(..., alias="messageNumber")
    message_time: str = Field(..., min_length=1, alias="messageTime")


class RocketLaunchedPayload(_FrozenModel):
    """Payload de RocketLaunched."""

    type: str
    launch_speed: Number = Field(..., alias="launchSpeed")
    mission: str


class SpeedChangePayload(_FrozenModel):
    """Payload de RocketSpeedIncreased e RocketSpeedDecreased."""

    by: Number


class RocketExplodedPayload(_FrozenModel):
    """Payload de RocketExploded."""

    reason: str


class MissionChangedPayload(_FrozenModel):
    """Payload de RocketMissionChanged."""

    new_mission: str = Field(..., alias="newMission")


RocketPayload = (
    RocketLaunchedPayload | SpeedChangePayload | RocketExplodedPayload | MissionChangedPayload
)


class RocketMessage(BaseModel):
    """Mensagem tipada: metadados + tag da variante + payload da variante."""

    model_config = ConfigDict(frozen=True)

    metadata: MessageMetadata
    message_type: RocketMessageType
    payload: RocketPayload

    @property
    def channel(self) -> str:
        return self.metadata.channel

    @property
    def message_number(self) -> Number:
        return self.metadata.message_number

    @property
    def message_time(self) -> str:
        return self.metadata.message_time
