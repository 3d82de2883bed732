from __future__ import annotations

import logging
import threading
import time

import httpx
import pytest

from mediatel.config import DispatcherSettings
from mediatel.dispatch import AsyncDispatcher, HttpSeriesTransport

from fakes import RecordingTransport


def test_dispatch_returns_before_post_completes():
    gate = threading.Event()
    transport = RecordingTransport(gate=gate)
    dispatcher = AsyncDispatcher(transport)

    started = time.monotonic()
    assert dispatcher.dispatch("payload-1") is True
    assert time.monotonic() - started < 1.0
    assert transport.payloads == []

    gate.set()
    assert dispatcher.drain(timeout=5)
    assert transport.payloads == ["payload-1"]
    dispatcher.close(timeout=5)


def test_all_payloads_are_delivered_by_bounded_pool():
    transport = RecordingTransport()
    dispatcher = AsyncDispatcher(
        transport, settings=DispatcherSettings(max_workers=3, max_queue_size=100)
    )
    for i in range(50):
        dispatcher.dispatch(f"p{i}")

    assert dispatcher.drain(timeout=5)
    assert sorted(transport.payloads) == sorted(f"p{i}" for i in range(50))
    stats = dispatcher.stats()
    assert stats.sent == 50
    assert stats.workers <= 3
    dispatcher.close(timeout=5)


def test_non_200_response_is_logged_and_swallowed(caplog):
    client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(503)))
    transport = HttpSeriesTransport("http://influx/db/d/series?u=u&p=p", client=client)
    dispatcher = AsyncDispatcher(transport)

    with caplog.at_level(logging.INFO, logger="mediatel.dispatch"):
        assert dispatcher.dispatch("[]") is True
        assert dispatcher.drain(timeout=5)

    assert dispatcher.stats().failed == 1
    assert any("Failed to post" in record.getMessage() for record in caplog.records)
    dispatcher.close(timeout=5)


def test_drop_newest_rejects_payload_when_queue_full():
    gate = threading.Event()
    transport = RecordingTransport(gate=gate)
    dispatcher = AsyncDispatcher(
        transport,
        settings=DispatcherSettings(
            max_workers=1, max_queue_size=1, overflow_policy="drop_newest"
        ),
    )
    dispatcher.dispatch("first")
    deadline = time.monotonic() + 5
    while dispatcher.stats().in_flight == 0 and time.monotonic() < deadline:
        time.sleep(0.01)

    assert dispatcher.dispatch("second") is True
    assert dispatcher.dispatch("third") is False

    gate.set()
    assert dispatcher.drain(timeout=5)
    assert transport.payloads == ["first", "second"]
    assert dispatcher.stats().dropped == 1
    dispatcher.close(timeout=5)


def test_drop_oldest_keeps_most_recent_payload():
    gate = threading.Event()
    transport = RecordingTransport(gate=gate)
    dispatcher = AsyncDispatcher(
        transport,
        settings=DispatcherSettings(
            max_workers=1, max_queue_size=1, overflow_policy="drop_oldest"
        ),
    )
    dispatcher.dispatch("first")
    deadline = time.monotonic() + 5
    while dispatcher.stats().in_flight == 0 and time.monotonic() < deadline:
        time.sleep(0.01)

    dispatcher.dispatch("second")
    assert dispatcher.dispatch("third") is True

    gate.set()
    assert dispatcher.drain(timeout=5)
    assert transport.payloads == ["first", "third"]
    dispatcher.close(timeout=5)


def test_closed_dispatcher_drops_payloads():
    transport = RecordingTransport()
    dispatcher = AsyncDispatcher(transport)
    dispatcher.close(timeout=1)
    assert dispatcher.dispatch("late") is False
    assert dispatcher.stats().dropped == 1


def test_idle_workers_are_reclaimed():
    transport = RecordingTransport()
    dispatcher = AsyncDispatcher(
        transport, settings=DispatcherSettings(max_workers=2, idle_timeout_s=0.05)
    )
    dispatcher.dispatch("p")
    assert dispatcher.drain(timeout=5)

    deadline = time.monotonic() + 5
    while dispatcher.stats().workers and time.monotonic() < deadline:
        time.sleep(0.02)
    assert dispatcher.stats().workers == 0

    dispatcher.dispatch("again")
    assert dispatcher.drain(timeout=5)
    assert transport.payloads == ["p", "again"]
    dispatcher.close(timeout=5)


def test_invalid_bounds_are_rejected():
    with pytest.raises(ValueError):
        AsyncDispatcher(RecordingTransport(), settings=DispatcherSettings(max_workers=0))
