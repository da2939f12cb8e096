"""Tests for the in-process event bus."""

import asyncio
import logging

import pytest

from uplugin_builder.core.event_bus import EventBus


def test_sync_subscribers_receive_arguments():
    bus = EventBus()
    received = []
    bus.subscribe("ping", lambda *args, **kwargs: received.append((args, kwargs)))

    bus.emit("ping", 1, two=2)

    assert received == [((1,), {"two": 2})]


def test_failing_subscriber_does_not_block_others():
    bus = EventBus()
    received = []

    def broken(_):
        raise RuntimeError("boom")

    bus.subscribe("ping", broken)
    bus.subscribe("ping", received.append)
    bus.emit("ping", "payload")

    assert received == ["payload"]


@pytest.mark.asyncio
async def test_coroutine_subscribers_are_scheduled():
    bus = EventBus()
    done = asyncio.Event()
    received = []

    async def handler(value):
        received.append(value)
        done.set()

    bus.subscribe("ping", handler)
    bus.emit("ping", 42)

    await asyncio.wait_for(done.wait(), timeout=5)
    assert received == [42]


@pytest.mark.asyncio
async def test_failing_coroutine_subscriber_is_logged(caplog):
    bus = EventBus()
    finished = asyncio.Event()

    async def broken():
        try:
            raise RuntimeError("launch blew up")
        finally:
            finished.set()

    bus.subscribe("build_requested", broken)
    with caplog.at_level(logging.ERROR):
        bus.emit("build_requested")
        await asyncio.wait_for(finished.wait(), timeout=5)
        # Let the done-callback run.
        await asyncio.sleep(0)
        await asyncio.sleep(0)

    assert "Error in async callback for event 'build_requested'" in caplog.text
    assert "launch blew up" in caplog.text
    assert bus._pending_tasks == set()
