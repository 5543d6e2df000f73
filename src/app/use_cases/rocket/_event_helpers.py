"""Helpers de montagem do evento de domínio a partir da mensagem tipada."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.constants.rocket import EVENT_TYPE_BY_MESSAGE_TYPE, ROCKET_EVENT_TOPIC

if TYPE_CHECKING:
    from app.domain.rocket_message import RocketMessage


@dataclass(frozen=True, slots=True)
class RocketEvent:
    """Evento pronto para `emit(topic, event_type, subject, payload)`."""

    topic: str
    event_type: str
    subject: str
    payload: dict[str, Any]


def build_event_payload(message: RocketMessage) -> dict[str, Any]:
    """Monta payload: bloco `meta` + campos da variante.

    Shape fixo:
        {"meta": {"timestamp": messageTime, "sequence": messageNumber}, **campos}
    """
    return {
        "meta": {
            "timestamp": message.message_time,
            "sequence": message.message_number,
        },
        **message.payload.to_event_payload(),
    }


def build_rocket_event(message: RocketMessage) -> RocketEvent:
    """Traduz a mensagem tipada no único evento correspondente."""
    return RocketEvent(
        topic=ROCKET_EVENT_TOPIC,
        event_type=str(EVENT_TYPE_BY_MESSAGE_TYPE[message.message_type]),
        subject=message.channel,
        payload=build_event_payload(message),
    )
