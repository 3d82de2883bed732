"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Notification protocol called by the session model on lifecycle transitions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

from ..events.models import Event
from ..session.types import (
    Channel,
    Conference,
    Content,
    Endpoint,
    IceTransportManager,
    RtpChannel,
)

logger = logging.getLogger("mediatel.services")


@runtime_checkable
class LoggingService(Protocol):
    """
    Notification sink for session lifecycle signals.

    Implementations are called synchronously on session-model threads and
    must never raise or block on I/O.
    """

    def log_event(self, event: Event) -> None:
        """Record one prebuilt event."""
        ...

    def conference_created(self, conference: Conference | None) -> None: ...

    def conference_expired(self, conference: Conference | None) -> None: ...

    def endpoint_created(self, endpoint: Endpoint | None) -> None: ...

    def endpoint_display_name_changed(self, endpoint: Endpoint | None) -> None: ...

    def content_created(self, content: Content | None) -> None: ...

    def content_expired(self, content: Content | None) -> None: ...

    def transport_channel_added(self, channel: Channel | None) -> None: ...

    def transport_channel_removed(self, channel: Channel | None) -> None: ...

    def transport_state_changed(
        self,
        transport_manager: IceTransportManager | None,
        old_state: object | None,
        new_state: object | None,
    ) -> None: ...

    def transport_created(
        self, transport_manager: IceTransportManager | None
    ) -> None: ...

    def transport_connected(
        self, transport_manager: IceTransportManager | None
    ) -> None: ...

    def channel_created(self, channel: RtpChannel | None) -> None: ...

    def channel_expired(self, channel: Channel | None) -> None: ...

    def channel_started_streaming(self, channel: RtpChannel | None) -> None: ...


def first_missing(**refs: object) -> str | None:
    """Return the name of the first ``None`` reference, in argument order."""
    for name, value in refs.items():
        if value is None:
            return name
    return None


def skip_missing(signal: str, **refs: object) -> bool:
    """
    Validate required references for `signal` in one step.

    Returns:
        ``True`` when a reference is missing; a debug record names it.
    """
    missing = first_missing(**refs)
    if missing is None:
        return False
    logger.debug(
        "Could not log %s event because the %s is null.",
        signal,
        missing.replace("_", " "),
    )
    return True


class NullLoggingService:
    """No-op service installed when no telemetry sink is configured."""

    def log_event(self, event: Event) -> None:
        _ = event

    def conference_created(self, conference: Conference | None) -> None:
        _ = conference

    def conference_expired(self, conference: Conference | None) -> None:
        _ = conference

    def endpoint_created(self, endpoint: Endpoint | None) -> None:
        _ = endpoint

    def endpoint_display_name_changed(self, endpoint: Endpoint | None) -> None:
        _ = endpoint

    def content_created(self, content: Content | None) -> None:
        _ = content

    def content_expired(self, content: Content | None) -> None:
        _ = content

    def transport_channel_added(self, channel: Channel | None) -> None:
        _ = channel

    def transport_channel_removed(self, channel: Channel | None) -> None:
        _ = channel

    def transport_state_changed(
        self,
        transport_manager: IceTransportManager | None,
        old_state: object | None,
        new_state: object | None,
    ) -> None:
        _ = transport_manager
        _ = old_state
        _ = new_state

    def transport_created(self, transport_manager: IceTransportManager | None) -> None:
        _ = transport_manager

    def transport_connected(
        self, transport_manager: IceTransportManager | None
    ) -> None:
        _ = transport_manager

    def channel_created(self, channel: RtpChannel | None) -> None:
        _ = channel

    def channel_expired(self, channel: Channel | None) -> None:
        _ = channel

    def channel_started_streaming(self, channel: RtpChannel | None) -> None:
        _ = channel


class CompositeLoggingService:
    """
    Forward every notification to several services in order.

    A delegate that raises is logged and skipped; the remaining delegates
    still receive the notification.
    """

    def __init__(self, services: Sequence[LoggingService]) -> None:
        self._services = tuple(services)

    @property
    def services(self) -> tuple[LoggingService, ...]:
        return self._services

    def _each(self, signal: str, call: Callable[[LoggingService], None]) -> None:
        for service in self._services:
            try:
                call(service)
            except Exception:
                logger.exception(
                    "Error delivering %s to %s", signal, type(service).__name__
                )

    def log_event(self, event: Event) -> None:
        self._each("log_event", lambda s: s.log_event(event))

    def conference_created(self, conference: Conference | None) -> None:
        self._each("conference_created", lambda s: s.conference_created(conference))

    def conference_expired(self, conference: Conference | None) -> None:
        self._each("conference_expired", lambda s: s.conference_expired(conference))

    def endpoint_created(self, endpoint: Endpoint | None) -> None:
        self._each("endpoint_created", lambda s: s.endpoint_created(endpoint))

    def endpoint_display_name_changed(self, endpoint: Endpoint | None) -> None:
        self._each(
            "endpoint_display_name_changed",
            lambda s: s.endpoint_display_name_changed(endpoint),
        )

    def content_created(self, content: Content | None) -> None:
        self._each("content_created", lambda s: s.content_created(content))

    def content_expired(self, content: Content | None) -> None:
        self._each("content_expired", lambda s: s.content_expired(content))

    def transport_channel_added(self, channel: Channel | None) -> None:
        self._each(
            "transport_channel_added", lambda s: s.transport_channel_added(channel)
        )

    def transport_channel_removed(self, channel: Channel | None) -> None:
        self._each(
            "transport_channel_removed",
            lambda s: s.transport_channel_removed(channel),
        )

    def transport_state_changed(
        self,
        transport_manager: IceTransportManager | None,
        old_state: object | None,
        new_state: object | None,
    ) -> None:
        self._each(
            "transport_state_changed",
            lambda s: s.transport_state_changed(transport_manager, old_state, new_state),
        )

    def transport_created(self, transport_manager: IceTransportManager | None) -> None:
        self._each(
            "transport_created", lambda s: s.transport_created(transport_manager)
        )

    def transport_connected(
        self, transport_manager: IceTransportManager | None
    ) -> None:
        self._each(
            "transport_connected", lambda s: s.transport_connected(transport_manager)
        )

    def channel_created(self, channel: RtpChannel | None) -> None:
        self._each("channel_created", lambda s: s.channel_created(channel))

    def channel_expired(self, channel: Channel | None) -> None:
        self._each("channel_expired", lambda s: s.channel_expired(channel))

    def channel_started_streaming(self, channel: RtpChannel | None) -> None:
        self._each(
            "channel_started_streaming",
            lambda s: s.channel_started_streaming(channel),
        )
