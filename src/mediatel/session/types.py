"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Read-only views of the media session model consumed by telemetry.

The session model owns these objects. Telemetry only reads identifiers,
expiry flags and parent links; it never creates, expires or mutates them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


class Videobridge(Protocol):
    """Root of the live session tree."""

    @property
    def conferences(self) -> Sequence[Conference | None]: ...


class Conference(Protocol):
    """One COLIBRI conference."""

    @property
    def id(self) -> str: ...

    @property
    def focus(self) -> str | None: ...

    @property
    def is_expired(self) -> bool: ...

    @property
    def videobridge(self) -> Videobridge | None: ...

    @property
    def contents(self) -> Sequence[Content | None]: ...

    @property
    def endpoints(self) -> Sequence[Endpoint | None]: ...


class Content(Protocol):
    """Media content (audio, video, data) grouping channels."""

    @property
    def name(self) -> str: ...

    @property
    def is_expired(self) -> bool: ...

    @property
    def conference(self) -> Conference | None: ...

    @property
    def channels(self) -> Sequence[Channel | None]: ...


class Endpoint(Protocol):
    """One conference participant."""

    @property
    def id(self) -> str: ...

    @property
    def display_name(self) -> str | None: ...

    @property
    def conference(self) -> Conference | None: ...


class Channel(Protocol):
    """
    One channel inside a content.

    Reading `transport_manager` may raise `OSError` when the transport could
    not be initialized.
    """

    @property
    def id(self) -> str: ...

    @property
    def is_expired(self) -> bool: ...

    @property
    def content(self) -> Content | None: ...

    @property
    def endpoint(self) -> Endpoint | None: ...

    @property
    def transport_manager(self) -> IceTransportManager: ...


@runtime_checkable
class LastNCapable(Protocol):
    """Channels (video) that carry a last-N value."""

    @property
    def last_n(self) -> int: ...


class RtpChannel(Channel, Protocol):
    """Channel carrying RTP media."""

    @property
    def stream_target_address(self) -> str | None: ...


class CandidatePair(Protocol):
    @property
    def local_address(self) -> str: ...

    @property
    def remote_address(self) -> str: ...


class IceComponent(Protocol):
    @property
    def selected_pair(self) -> CandidatePair | None: ...


class IceStream(Protocol):
    @property
    def components(self) -> Sequence[IceComponent]: ...


class IceAgent(Protocol):
    @property
    def local_ufrag(self) -> str | None: ...


class IceTransportManager(Protocol):
    """ICE/UDP transport shared by the channels of one endpoint."""

    @property
    def conference(self) -> Conference | None: ...

    @property
    def agent(self) -> IceAgent | None: ...

    @property
    def ice_stream(self) -> IceStream | None: ...

    @property
    def num_components(self) -> int: ...

    @property
    def is_controlling(self) -> bool: ...
