"""Testes do use case de dedupe + despacho."""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from api.validators.rocket import decode_rocket_message
from app.infra.events import MemoryEventEmitter
from app.infra.stores import MemoryDedupeStore
from app.use_cases.rocket import DispatchResult, DispatchRocketEventUseCase
from tests.fakes.fake_event_emitter import FailingEventEmitter, YieldingEventEmitter
from tests.fakes.rocket_messages import (
    MESSAGE_TIME,
    exploded_message,
    launched_message,
    mission_changed_message,
    speed_decreased_message,
    speed_increased_message,
)
from utils.errors import EventPublishError


def _build_dispatcher(
    emitter: object | None = None,
) -> tuple[DispatchRocketEventUseCase, MemoryDedupeStore, MemoryEventEmitter]:
    dedupe = MemoryDedupeStore()
    memory_emitter = MemoryEventEmitter()
    use_case = DispatchRocketEventUseCase(
        dedupe=dedupe,
        emitter=emitter if emitter is not None else memory_emitter,  # type: ignore[arg-type]
    )
    return use_case, dedupe, memory_emitter


@pytest.mark.asyncio
async def test_new_message_emits_launched_event() -> None:
    use_case, _, emitter = _build_dispatcher()
    message = decode_rocket_message(launched_message(channel="c1", message_number=1))

    result = await use_case.execute(message)

    assert result == DispatchResult(emitted=True, duplicate=False, event_type="launched")
    events = emitter.get_events()
    assert len(events) == 1
    assert events[0].topic == "rocket"
    assert events[0].event_type == "launched"
    assert events[0].subject == "c1"
    assert events[0].payload == {
        "meta": {"timestamp": MESSAGE_TIME, "sequence": 1},
        "type": "Falcon-9",
        "launchSpeed": 500,
        "mission": "ARTEMIS",
    }


@pytest.mark.asyncio
async def test_speed_increased_payload() -> None:
    use_case, _, emitter = _build_dispatcher()
    message = decode_rocket_message(speed_increased_message(channel="c2", message_number=2))

    await use_case.execute(message)

    event = emitter.get_events()[0]
    assert event.event_type == "speed-increased"
    assert event.payload["by"] == 3000
    assert event.payload["meta"]["sequence"] == 2


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("builder", "event_type"),
    [
        (speed_decreased_message, "speed-decreased"),
        (exploded_message, "exploded"),
        (mission_changed_message, "mission-changed"),
    ],
)
async def test_event_type_mapping(builder: object, event_type: str) -> None:
    use_case, _, emitter = _build_dispatcher()
    message = decode_rocket_message(builder())  # type: ignore[operator]

    result = await use_case.execute(message)

    assert result.event_type == event_type
    assert [event.event_type for event in emitter.get_events()] == [event_type]


@pytest.mark.asyncio
async def test_duplicate_is_success_without_emission() -> None:
    use_case, _, emitter = _build_dispatcher()
    data = launched_message(channel="dup", message_number=4)

    first = await use_case.execute(decode_rocket_message(data))
    second = await use_case.execute(decode_rocket_message(data))

    assert first.emitted is True
    assert second == DispatchResult(emitted=False, duplicate=True)
    assert len(emitter.get_events()) == 1


@pytest.mark.asyncio
async def test_duplicate_detection_ignores_message_type() -> None:
    use_case, _, emitter = _build_dispatcher()

    await use_case.execute(decode_rocket_message(launched_message(channel="c", message_number=7)))
    result = await use_case.execute(
        decode_rocket_message(exploded_message(channel="c", message_number=7))
    )

    assert result.duplicate is True
    assert len(emitter.get_events()) == 1


@pytest.mark.asyncio
async def test_integral_float_is_same_sequence() -> None:
    use_case, _, emitter = _build_dispatcher()

    await use_case.execute(decode_rocket_message(launched_message(channel="c", message_number=4)))
    result = await use_case.execute(
        decode_rocket_message(launched_message(channel="c", message_number=4.0))
    )

    assert result.duplicate is True
    assert len(emitter.get_events()) == 1


@pytest.mark.asyncio
async def test_same_number_on_other_channel_is_new() -> None:
    use_case, _, emitter = _build_dispatcher()

    await use_case.execute(decode_rocket_message(launched_message(channel="a", message_number=1)))
    await use_case.execute(decode_rocket_message(launched_message(channel="b", message_number=1)))

    assert [event.subject for event in emitter.get_events()] == ["a", "b"]


@pytest.mark.asyncio
async def test_out_of_order_numbers_emit_in_arrival_order() -> None:
    use_case, _, emitter = _build_dispatcher()

    await use_case.execute(
        decode_rocket_message(speed_increased_message(channel="c", message_number=10))
    )
    await use_case.execute(
        decode_rocket_message(speed_decreased_message(channel="c", message_number=5))
    )

    events = emitter.get_events()
    assert [event.payload["meta"]["sequence"] for event in events] == [10, 5]
    assert [event.event_type for event in events] == ["speed-increased", "speed-decreased"]


@pytest.mark.asyncio
async def test_concurrent_identical_messages_emit_once() -> None:
    emitter = YieldingEventEmitter()
    use_case, _, _ = _build_dispatcher(emitter)
    message = decode_rocket_message(launched_message(channel="race", message_number=1))

    results = await asyncio.gather(*(use_case.execute(message) for _ in range(50)))

    assert sum(result.emitted for result in results) == 1
    assert sum(result.duplicate for result in results) == 49
    assert len(emitter.events) == 1


def test_memory_ledger_is_atomic_across_threads() -> None:
    dedupe = MemoryDedupeStore()

    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(lambda _: dedupe.seen("thread-channel", 1), range(200)))

    assert outcomes.count(False) == 1
    assert outcomes.count(True) == 199


@pytest.mark.asyncio
async def test_publish_failure_raises_and_keeps_ledger_entry() -> None:
    emitter = FailingEventEmitter()
    use_case, dedupe, _ = _build_dispatcher(emitter)
    message = decode_rocket_message(launched_message(channel="fail", message_number=3))

    with pytest.raises(EventPublishError):
        await use_case.execute(message)

    assert dedupe.sequences_for("fail") == frozenset({3})
    # Reentrega é tratada como duplicada
    result = await use_case.execute(message)
    assert result.duplicate is True
    assert len(emitter.attempts) == 1


@pytest.mark.asyncio
async def test_unexpected_emitter_error_is_wrapped() -> None:
    emitter = FailingEventEmitter(ConnectionError("socket closed"))
    use_case, _, _ = _build_dispatcher(emitter)
    message = decode_rocket_message(exploded_message(channel="x", message_number=1))

    with pytest.raises(EventPublishError) as exc_info:
        await use_case.execute(message)

    assert exc_info.value.topic == "rocket"
    assert exc_info.value.event_type == "exploded"
    assert isinstance(exc_info.value.__cause__, ConnectionError)


@pytest.mark.asyncio
async def test_record_is_visible_before_emit() -> None:
    dedupe = MemoryDedupeStore()
    observed: list[frozenset[int | float]] = []

    class _ObservingEmitter:
        async def emit(self, topic: str, event_type: str, subject: str, payload: dict) -> None:
            observed.append(dedupe.sequences_for(subject))

    use_case = DispatchRocketEventUseCase(dedupe=dedupe, emitter=_ObservingEmitter())
    await use_case.execute(decode_rocket_message(launched_message(channel="v", message_number=8)))

    assert observed == [frozenset({8})]
