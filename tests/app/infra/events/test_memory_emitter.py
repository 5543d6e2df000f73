"""Testes do MemoryEventEmitter."""

from __future__ import annotations

import pytest

from app.infra.events import EmittedEvent, MemoryEventEmitter


@pytest.mark.asyncio
async def test_emit_records_events_in_order() -> None:
    emitter = MemoryEventEmitter()

    await emitter.emit("rocket", "launched", "c1", {"a": 1})
    await emitter.emit("rocket", "exploded", "c1", {"b": 2})

    assert emitter.get_events() == [
        EmittedEvent(topic="rocket", event_type="launched", subject="c1", payload={"a": 1}),
        EmittedEvent(topic="rocket", event_type="exploded", subject="c1", payload={"b": 2}),
    ]


@pytest.mark.asyncio
async def test_payload_is_copied() -> None:
    emitter = MemoryEventEmitter()
    payload = {"meta": {"sequence": 1}}

    await emitter.emit("rocket", "launched", "c1", payload)
    payload["meta"]["sequence"] = 99

    assert emitter.get_events()[0].payload == {"meta": {"sequence": 1}}


@pytest.mark.asyncio
async def test_max_events_keeps_latest() -> None:
    emitter = MemoryEventEmitter(max_events=2)

    for index in range(3):
        await emitter.emit("rocket", "launched", f"c{index}", {})

    assert [event.subject for event in emitter.get_events()] == ["c1", "c2"]


@pytest.mark.asyncio
async def test_clear() -> None:
    emitter = MemoryEventEmitter()
    await emitter.emit("rocket", "launched", "c1", {})

    emitter.clear()

    assert emitter.get_events() == []
