"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Logging service that writes lifecycle events to a time-series database.
"""

from __future__ import annotations

import logging

from ..config import TimeSeriesSettings
from ..dispatch.dispatcher import AsyncDispatcher
from ..dispatch.transport import HttpSeriesTransport
from ..events import factory
from ..events.encoder import TimeSeriesEncoder
from ..events.models import Event
from ..session.types import (
    Channel,
    Conference,
    Content,
    Endpoint,
    IceTransportManager,
    LastNCapable,
    RtpChannel,
)
from .base import skip_missing

logger = logging.getLogger("mediatel.services.timeseries")


class TimeSeriesLoggingService:
    """
    `LoggingService` backed by the time-series HTTP series API.

    Each handler validates its references, builds the event and encodes it on
    the calling thread; only the POST is deferred to the dispatcher. Nothing
    is ever raised to the session model.
    """

    def __init__(
        self,
        dispatcher: AsyncDispatcher,
        *,
        encoder: TimeSeriesEncoder | None = None,
        transport: HttpSeriesTransport | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._encoder = encoder or TimeSeriesEncoder()
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: TimeSeriesSettings) -> "TimeSeriesLoggingService":
        """
        Build the service, its HTTP transport and dispatcher from settings.

        Raises:
            ConfigurationError: If a required connection setting is missing or
                the dispatcher bounds are invalid.
        """
        url = settings.require_url()
        settings.dispatcher.validate()
        transport = HttpSeriesTransport(url, timeout_s=settings.timeout_s)
        try:
            dispatcher = AsyncDispatcher(transport, settings=settings.dispatcher)
        except Exception:
            transport.close()
            raise
        logger.info(
            "Initialized time-series logging for %s, database %r",
            settings.url_base,
            settings.database,
        )
        return cls(dispatcher, transport=transport)

    @property
    def dispatcher(self) -> AsyncDispatcher:
        return self._dispatcher

    def log_event(self, event: Event) -> None:
        """Encode `event` and hand it to the dispatcher without blocking."""
        # TODO: group events of the same type into one multi-point POST.
        self._dispatcher.dispatch(self._encoder.encode_json(event))

    def close(self, timeout: float | None = None) -> None:
        self._dispatcher.close(timeout)
        if self._transport is not None:
            self._transport.close()

    def conference_created(self, conference: Conference | None) -> None:
        if skip_missing("conference created", conference=conference):
            return
        self.log_event(factory.conference_created(conference.id, conference.focus))

    def conference_expired(self, conference: Conference | None) -> None:
        if skip_missing("conference expired", conference=conference):
            return
        self.log_event(factory.conference_expired(conference.id))

    def endpoint_created(self, endpoint: Endpoint | None) -> None:
        conference = endpoint.conference if endpoint is not None else None
        if skip_missing("endpoint created", endpoint=endpoint, conference=conference):
            return
        self.log_event(factory.endpoint_created(conference.id, endpoint.id))

    def endpoint_display_name_changed(self, endpoint: Endpoint | None) -> None:
        conference = endpoint.conference if endpoint is not None else None
        if skip_missing(
            "endpoint display name changed",
            endpoint=endpoint,
            conference=conference,
        ):
            return
        self.log_event(
            factory.endpoint_display_name_changed(
                conference.id, endpoint.id, endpoint.display_name
            )
        )

    def content_created(self, content: Content | None) -> None:
        conference = content.conference if content is not None else None
        if skip_missing("content created", content=content, conference=conference):
            return
        self.log_event(factory.content_created(content.name, conference.id))

    def content_expired(self, content: Content | None) -> None:
        conference = content.conference if content is not None else None
        if skip_missing("content expired", content=content, conference=conference):
            return
        self.log_event(factory.content_expired(content.name, conference.id))

    def _channel_parents(
        self, signal: str, channel: Channel | None
    ) -> tuple[Content, Conference] | None:
        content = channel.content if channel is not None else None
        conference = content.conference if content is not None else None
        if skip_missing(signal, channel=channel, content=content, conference=conference):
            return None
        return content, conference

    def _transport_of(
        self, signal: str, channel: Channel
    ) -> IceTransportManager | None:
        try:
            transport_manager = channel.transport_manager
        except OSError:
            logger.error(
                "Could not log the %s event because of an error.",
                signal,
                exc_info=True,
            )
            return None
        if skip_missing(signal, transport_manager=transport_manager):
            return None
        return transport_manager

    def transport_channel_added(self, channel: Channel | None) -> None:
        parents = self._channel_parents("transport channel added", channel)
        if parents is None:
            return
        transport_manager = self._transport_of("transport channel added", channel)
        if transport_manager is None:
            return
        _, conference = parents
        self.log_event(
            factory.transport_channel_added(
                hash(transport_manager), conference.id, channel.id
            )
        )

    def transport_channel_removed(self, channel: Channel | None) -> None:
        parents = self._channel_parents("transport channel removed", channel)
        if parents is None:
            return
        transport_manager = self._transport_of("transport channel removed", channel)
        if transport_manager is None:
            return
        _, conference = parents
        self.log_event(
            factory.transport_channel_removed(
                hash(transport_manager), conference.id, channel.id
            )
        )

    def transport_state_changed(
        self,
        transport_manager: IceTransportManager | None,
        old_state: object | None,
        new_state: object | None,
    ) -> None:
        conference = (
            transport_manager.conference if transport_manager is not None else None
        )
        if skip_missing(
            "transport state changed",
            transport_manager=transport_manager,
            conference=conference,
        ):
            return
        self.log_event(
            factory.transport_state_changed(
                hash(transport_manager), conference.id, old_state, new_state
            )
        )

    def transport_created(self, transport_manager: IceTransportManager | None) -> None:
        conference = agent = None
        if transport_manager is not None:
            conference = transport_manager.conference
            agent = transport_manager.agent
        if skip_missing(
            "transport created",
            transport_manager=transport_manager,
            conference=conference,
            agent=agent,
        ):
            return
        self.log_event(
            factory.transport_created(
                hash(transport_manager),
                conference.id,
                transport_manager.num_components,
                agent.local_ufrag,
                transport_manager.is_controlling,
            )
        )

    def transport_connected(
        self, transport_manager: IceTransportManager | None
    ) -> None:
        conference = stream = None
        if transport_manager is not None:
            conference = transport_manager.conference
            stream = transport_manager.ice_stream
        if skip_missing(
            "transport connected",
            transport_manager=transport_manager,
            conference=conference,
            ice_stream=stream,
        ):
            return
        self.log_event(
            factory.transport_connected(
                hash(transport_manager),
                conference.id,
                factory.format_selected_pairs(stream),
            )
        )

    def _channel_event(self, channel: Channel, content: Content, conference: Conference):
        endpoint = channel.endpoint
        endpoint_id = endpoint.id if endpoint is not None else ""
        last_n = channel.last_n if isinstance(channel, LastNCapable) else -1
        return channel.id, content.name, conference.id, endpoint_id, last_n

    def channel_created(self, channel: RtpChannel | None) -> None:
        parents = self._channel_parents("channel created", channel)
        if parents is None:
            return
        self.log_event(factory.channel_created(*self._channel_event(channel, *parents)))

    def channel_expired(self, channel: Channel | None) -> None:
        parents = self._channel_parents("channel expired", channel)
        if parents is None:
            return
        self.log_event(factory.channel_expired(*self._channel_event(channel, *parents)))

    def channel_started_streaming(self, channel: RtpChannel | None) -> None:
        # Streaming start is only tracked by metric publishers.
        _ = channel
