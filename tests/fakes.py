from __future__ import annotations

import threading
from dataclasses import dataclass, field

from mediatel.errors import TransportError


@dataclass(eq=False)
class FakeVideobridge:
    conferences: list = field(default_factory=list)


@dataclass(eq=False)
class FakeConference:
    id: str
    focus: str | None = None
    is_expired: bool = False
    videobridge: FakeVideobridge | None = None
    contents: list = field(default_factory=list)
    endpoints: list = field(default_factory=list)


@dataclass(eq=False)
class FakeContent:
    name: str
    conference: FakeConference | None = None
    is_expired: bool = False
    channels: list = field(default_factory=list)


@dataclass(eq=False)
class FakeEndpoint:
    id: str
    display_name: str | None = None
    conference: FakeConference | None = None


@dataclass(eq=False)
class FakeAgent:
    local_ufrag: str | None = "ufrag1"


@dataclass(eq=False)
class FakePair:
    local_address: str
    remote_address: str


@dataclass(eq=False)
class FakeComponent:
    selected_pair: FakePair | None = None


@dataclass(eq=False)
class FakeStream:
    components: list = field(default_factory=list)


@dataclass(eq=False)
class FakeTransportManager:
    conference: FakeConference | None = None
    agent: FakeAgent | None = None
    ice_stream: FakeStream | None = None
    num_components: int = 1
    is_controlling: bool = True


@dataclass(eq=False)
class FakeChannel:
    id: str
    content: FakeContent | None = None
    endpoint: FakeEndpoint | None = None
    is_expired: bool = False
    stream_target_address: str | None = None
    transport: FakeTransportManager | None = None
    transport_error: OSError | None = None

    @property
    def transport_manager(self) -> FakeTransportManager | None:
        if self.transport_error is not None:
            raise self.transport_error
        return self.transport


@dataclass(eq=False)
class FakeVideoChannel(FakeChannel):
    last_n: int = 5


def build_bridge(live: int = 0, expired: int = 0) -> FakeVideobridge:
    """Bridge with `live` running and `expired` expired conferences."""
    bridge = FakeVideobridge()
    for i in range(live):
        bridge.conferences.append(FakeConference(id=f"live{i}", videobridge=bridge))
    for i in range(expired):
        bridge.conferences.append(
            FakeConference(id=f"gone{i}", videobridge=bridge, is_expired=True)
        )
    return bridge


def add_channel(
    conference: FakeConference,
    channel_id: str,
    *,
    content_name: str = "audio",
    expired: bool = False,
) -> FakeChannel:
    """Attach a channel to `conference`, creating the content on demand."""
    content = next((c for c in conference.contents if c.name == content_name), None)
    if content is None:
        content = FakeContent(name=content_name, conference=conference)
        conference.contents.append(content)
    channel = FakeChannel(id=channel_id, content=content, is_expired=expired)
    content.channels.append(channel)
    return channel


class RecordingTransport:
    """Series transport that records payloads instead of posting them."""

    def __init__(self, *, fail: bool = False, gate: threading.Event | None = None) -> None:
        self.payloads: list[str] = []
        self._fail = fail
        self._gate = gate
        self._lock = threading.Lock()

    def post(self, payload: str) -> None:
        if self._gate is not None:
            self._gate.wait(timeout=5)
        if self._fail:
            raise TransportError("HTTP response code: 500", status_code=500)
        with self._lock:
            self.payloads.append(payload)
