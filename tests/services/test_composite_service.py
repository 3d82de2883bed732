from __future__ import annotations

import logging

from mediatel.services import CompositeLoggingService, LoggingService, NullLoggingService

from fakes import FakeConference


class _Recorder(NullLoggingService):
    def __init__(self) -> None:
        self.created: list[str] = []

    def conference_created(self, conference) -> None:
        self.created.append(conference.id)


class _Exploding(NullLoggingService):
    def conference_created(self, conference) -> None:
        raise RuntimeError("boom")


def test_null_service_satisfies_protocol():
    assert isinstance(NullLoggingService(), LoggingService)


def test_composite_isolates_failing_delegate(caplog):
    first, last = _Recorder(), _Recorder()
    composite = CompositeLoggingService([first, _Exploding(), last])

    with caplog.at_level(logging.ERROR, logger="mediatel.services"):
        composite.conference_created(FakeConference(id="conf1"))

    assert first.created == ["conf1"]
    assert last.created == ["conf1"]
    assert any("conference_created" in r.getMessage() for r in caplog.records)


def test_composite_forwards_other_signals_without_error():
    composite = CompositeLoggingService([NullLoggingService()])
    composite.channel_started_streaming(None)
    composite.transport_state_changed(None, None, None)
    assert len(composite.services) == 1
