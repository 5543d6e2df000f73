"""Testes do decoder de mensagens de telemetria."""

from __future__ import annotations

import math
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from api.validators.rocket import (
    MessageValidationError,
    UnknownMessageTypeError,
    decode_rocket_message,
)
from app.constants.rocket import RocketMessageType
from app.domain.rocket_message import (
    MissionChangedPayload,
    RocketExplodedPayload,
    RocketLaunchedPayload,
    SpeedChangePayload,
)
from tests.fakes.rocket_messages import (
    build_rocket_message,
    exploded_message,
    launched_message,
    mission_changed_message,
    speed_decreased_message,
    speed_increased_message,
)


def _reason_for(data: Any) -> str:
    with pytest.raises(MessageValidationError) as exc_info:
        decode_rocket_message(data)
    return exc_info.value.reason


class TestEnvelope:
    """Regras 1 a 3: corpo, metadata e message."""

    @pytest.mark.parametrize("data", [None, [], "texto", 42, True])
    def test_rejects_non_object_body(self, data: Any) -> None:
        assert _reason_for(data) == "Body must be a JSON object"

    @pytest.mark.parametrize("metadata", [None, "x", [], 1])
    def test_rejects_missing_or_non_object_metadata(self, metadata: Any) -> None:
        data = launched_message()
        data["metadata"] = metadata
        assert _reason_for(data) == "Missing or invalid metadata"

    def test_rejects_absent_metadata(self) -> None:
        data = launched_message()
        del data["metadata"]
        assert _reason_for(data) == "Missing or invalid metadata"

    @pytest.mark.parametrize("message", [None, "x", [], 1])
    def test_rejects_missing_or_non_object_message(self, message: Any) -> None:
        data = launched_message()
        data["message"] = message
        assert _reason_for(data) == "Missing or invalid message"

    def test_metadata_checked_before_message(self) -> None:
        assert _reason_for({"metadata": None}) == "Missing or invalid metadata"


class TestMetadata:
    """Regras 4 a 7: campos de metadata na ordem canônica."""

    @pytest.mark.parametrize("channel", ["", None, 123])
    def test_rejects_invalid_channel(self, channel: Any) -> None:
        data = launched_message()
        data["metadata"]["channel"] = channel
        assert _reason_for(data) == "Missing or invalid channel"

    @pytest.mark.parametrize(
        "number", ["1", None, True, math.nan, math.inf, 10**400, -(10**400)]
    )
    def test_rejects_invalid_message_number(self, number: Any) -> None:
        data = launched_message(message_number=number)
        assert _reason_for(data) == "Missing or invalid messageNumber"

    @pytest.mark.parametrize("number", [-3, 2.5, 0])
    def test_accepts_negative_and_fractional_message_number(self, number: Any) -> None:
        message = decode_rocket_message(launched_message(message_number=number))
        assert message.message_number == number

    @pytest.mark.parametrize("message_time", ["", None, 1700000000])
    def test_rejects_invalid_message_time(self, message_time: Any) -> None:
        data = launched_message(message_time=message_time)
        assert _reason_for(data) == "Missing or invalid messageTime"

    def test_message_time_is_not_parsed(self) -> None:
        message = decode_rocket_message(launched_message(message_time="ontem"))
        assert message.message_time == "ontem"

    def test_rejects_unknown_message_type(self) -> None:
        data = build_rocket_message("InvalidType", {})
        with pytest.raises(UnknownMessageTypeError) as exc_info:
            decode_rocket_message(data)
        assert exc_info.value.reason == "Invalid messageType"

    @pytest.mark.parametrize("message_type", [None, 7, ""])
    def test_rejects_non_string_message_type(self, message_type: Any) -> None:
        data = build_rocket_message("RocketLaunched", {})
        data["metadata"]["messageType"] = message_type
        assert _reason_for(data) == "Invalid messageType"

    def test_channel_checked_before_message_number(self) -> None:
        data = launched_message(message_number="x")
        data["metadata"]["channel"] = ""
        assert _reason_for(data) == "Missing or invalid channel"

    def test_metadata_checked_before_payload(self) -> None:
        data = build_rocket_message("RocketLaunched", {}, message_time="")
        assert _reason_for(data) == "Missing or invalid messageTime"


class TestLaunchedPayload:
    def test_decodes_launched(self) -> None:
        data = launched_message(channel="ch-1", message_number=1)

        message = decode_rocket_message(data)

        assert message.message_type is RocketMessageType.LAUNCHED
        assert message.channel == "ch-1"
        assert message.message_number == 1
        assert message.payload == RocketLaunchedPayload(
            type="Falcon-9", launch_speed=500, mission="ARTEMIS"
        )

    @pytest.mark.parametrize(
        ("field", "value", "reason"),
        [
            ("type", None, "Missing or invalid rocket type"),
            ("type", 9, "Missing or invalid rocket type"),
            ("launchSpeed", -1, "Missing or invalid launchSpeed"),
            ("launchSpeed", "500", "Missing or invalid launchSpeed"),
            ("launchSpeed", False, "Missing or invalid launchSpeed"),
            ("launchSpeed", 10**400, "Missing or invalid launchSpeed"),
            ("mission", None, "Missing or invalid mission"),
            ("mission", ["ARTEMIS"], "Missing or invalid mission"),
        ],
    )
    def test_rejects_invalid_fields(self, field: str, value: Any, reason: str) -> None:
        data = launched_message()
        data["message"][field] = value
        assert _reason_for(data) == reason

    def test_rejects_missing_field_in_order(self) -> None:
        data = build_rocket_message("RocketLaunched", {"launchSpeed": -5})
        assert _reason_for(data) == "Missing or invalid rocket type"

    def test_allows_empty_strings_in_payload(self) -> None:
        data = build_rocket_message("RocketLaunched", {"type": "", "launchSpeed": 0, "mission": ""})
        message = decode_rocket_message(data)
        assert message.payload.to_event_payload() == {"type": "", "launchSpeed": 0, "mission": ""}

    def test_drops_extraneous_fields(self) -> None:
        data = launched_message()
        data["message"]["fuel"] = "LOX"
        data["metadata"]["extra"] = True

        message = decode_rocket_message(data)

        assert message.payload.to_event_payload() == {
            "type": "Falcon-9",
            "launchSpeed": 500,
            "mission": "ARTEMIS",
        }


class TestOtherPayloads:
    @pytest.mark.parametrize(
        ("builder", "message_type"),
        [
            (speed_increased_message, RocketMessageType.SPEED_INCREASED),
            (speed_decreased_message, RocketMessageType.SPEED_DECREASED),
        ],
    )
    def test_decodes_speed_change(self, builder: Any, message_type: RocketMessageType) -> None:
        message = decode_rocket_message(builder())

        assert message.message_type is message_type
        assert isinstance(message.payload, SpeedChangePayload)

    @pytest.mark.parametrize("by", [None, -1, "3000", True, 10**400])
    def test_rejects_invalid_speed_change(self, by: Any) -> None:
        data = speed_decreased_message()
        data["message"]["by"] = by
        assert _reason_for(data) == "Missing or invalid speed change amount"

    def test_decodes_exploded(self) -> None:
        message = decode_rocket_message(exploded_message())
        assert message.payload == RocketExplodedPayload(reason="PRESSURE_VESSEL_FAILURE")

    def test_rejects_invalid_explosion_reason(self) -> None:
        data = build_rocket_message("RocketExploded", {"reason": 3})
        assert _reason_for(data) == "Missing or invalid explosion reason"

    def test_decodes_mission_changed(self) -> None:
        message = decode_rocket_message(mission_changed_message())
        assert message.payload == MissionChangedPayload(new_mission="SHUTTLE_MIR")
        assert message.payload.to_event_payload() == {"newMission": "SHUTTLE_MIR"}

    def test_rejects_invalid_new_mission(self) -> None:
        data = build_rocket_message("RocketMissionChanged", {"mission": "X"})
        assert _reason_for(data) == "Missing or invalid new mission"


class TestDecodedMessage:
    def test_message_is_immutable(self) -> None:
        message = decode_rocket_message(launched_message())

        with pytest.raises(PydanticValidationError):
            message.payload.mission = "OUTRA"  # type: ignore[misc]

    def test_validation_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            decode_rocket_message(None)

    def test_decode_does_not_mutate_input(self) -> None:
        data = launched_message(channel="ch-9")
        data["message"]["extra"] = 1
        snapshot = {"metadata": dict(data["metadata"]), "message": dict(data["message"])}

        decode_rocket_message(data)

        assert data == snapshot
