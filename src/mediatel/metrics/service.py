"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Metric fan-out facade over pluggable publishers.

Current metric entry points:

- conference created/expired: active conference count and conference length
- channel created/expired: active channel count
- channel started streaming: remote address of the stream target
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from ..config import MetricSettings
from ..contracts import (
    METRIC_CHANNEL_START_POSTFIX,
    METRIC_CHANNELS,
    METRIC_CONFERENCE_LENGTH,
    METRIC_CONFERENCES,
)
from ..events.models import Event
from ..session.types import (
    Channel,
    Conference,
    Content,
    Endpoint,
    IceTransportManager,
    RtpChannel,
)
from ..services.base import skip_missing
from .derived import count_live_channels, count_live_conferences
from .publisher import MetricServicePublisher, PublishOutcome, PublishResult
from .registry import create_metric_publisher

logger = logging.getLogger("mediatel.metrics")

PublisherCall = Callable[[MetricServicePublisher], PublishResult | None]


def _publisher_name(publisher: MetricServicePublisher) -> str:
    return str(getattr(publisher, "name", None) or type(publisher).__name__)


def _invoke(call: PublisherCall, publisher: MetricServicePublisher) -> PublishResult:
    try:
        result = call(publisher)
    except NotImplementedError:
        return PublishResult.unsupported()
    except Exception as exc:
        return PublishResult.failed(exc)
    return result if isinstance(result, PublishResult) else PublishResult.success()


class MetricService:
    """
    Fan metrics out to every registered publisher.

    The publisher list is fixed at construction and only read afterwards, so
    concurrent notification threads need no synchronization. Each publisher is
    isolated: an unsupported operation is logged at debug level, a failure at
    error level, and delivery continues with the next publisher.
    """

    def __init__(self, publishers: Sequence[MetricServicePublisher] = ()) -> None:
        self._publishers: tuple[MetricServicePublisher, ...] = tuple(publishers)

    @classmethod
    def from_settings(
        cls,
        settings: MetricSettings,
        *,
        publisher_configs: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> "MetricService":
        """
        Build the service from configured publisher ids.

        An entry that cannot be resolved or constructed is logged and skipped;
        the service starts with the remaining publishers.
        """
        configs = dict(publisher_configs or {})
        logger.info("Metric services enabled: %d", len(settings.publishers))
        publishers: list[MetricServicePublisher] = []
        for publisher_id in settings.publishers:
            logger.info("Initialising metric service: %s", publisher_id)
            try:
                publishers.append(
                    create_metric_publisher(
                        publisher_id, config=configs.get(publisher_id)
                    )
                )
            except Exception:
                logger.exception("Error initialising metric service %s", publisher_id)
        return cls(publishers)

    @property
    def publishers(self) -> tuple[MetricServicePublisher, ...]:
        return self._publishers

    def _fan_out(self, kind: str, metric: str, call: PublisherCall) -> list[PublishResult]:
        results: list[PublishResult] = []
        for publisher in self._publishers:
            result = _invoke(call, publisher)
            if result.outcome is PublishOutcome.UNSUPPORTED:
                logger.debug(
                    "%s publisher doesn't support %s metric: %s",
                    _publisher_name(publisher),
                    kind,
                    metric,
                )
            elif result.outcome is PublishOutcome.FAILED:
                logger.error(
                    'Error publishing metric "%s" with publisher: %s',
                    metric,
                    _publisher_name(publisher),
                    exc_info=result.error,
                )
            results.append(result)
        return results

    def publish_numeric(self, name: str, value: int | float) -> list[PublishResult]:
        return self._fan_out("numeric", name, lambda p: p.publish_numeric(name, value))

    def publish_string(self, name: str, value: str) -> list[PublishResult]:
        return self._fan_out("string", name, lambda p: p.publish_string(name, value))

    def publish_incremental(self, name: str, delta: int | None = None) -> list[PublishResult]:
        """Increase `name` by `delta` (by 1 when omitted)."""
        if delta is None:
            return self._fan_out(
                "incremental", name, lambda p: p.publish_incremental(name)
            )
        return self._fan_out(
            "incremental", name, lambda p: p.publish_incremental(name, delta)
        )

    def start_transaction(self, transaction_type: str, transaction_id: str) -> list[PublishResult]:
        """Record the start of a transaction whose length is published on end."""
        return self._fan_out(
            "measured transaction",
            transaction_type,
            lambda p: p.start_transaction(transaction_type, transaction_id),
        )

    def end_transaction(self, transaction_type: str, transaction_id: str) -> list[PublishResult]:
        return self._fan_out(
            "measured transaction",
            transaction_type,
            lambda p: p.end_transaction(transaction_type, transaction_id),
        )

    # Lifecycle notifications.

    def log_event(self, event: Event) -> None:
        _ = event

    def _publish_conference_count(self, signal: str, conference: Conference | None) -> bool:
        videobridge = conference.videobridge if conference is not None else None
        if skip_missing(signal, conference=conference, videobridge=videobridge):
            return False
        self.publish_numeric(METRIC_CONFERENCES, count_live_conferences(videobridge))
        return True

    def conference_created(self, conference: Conference | None) -> None:
        if self._publish_conference_count("conference created", conference):
            self.start_transaction(METRIC_CONFERENCE_LENGTH, conference.id)

    def conference_expired(self, conference: Conference | None) -> None:
        if self._publish_conference_count("conference expired", conference):
            self.end_transaction(METRIC_CONFERENCE_LENGTH, conference.id)

    def _publish_channel_count(self, signal: str, channel: Channel | None) -> None:
        content = channel.content if channel is not None else None
        conference = content.conference if content is not None else None
        videobridge = conference.videobridge if conference is not None else None
        if skip_missing(
            signal,
            channel=channel,
            content=content,
            conference=conference,
            videobridge=videobridge,
        ):
            return
        self.publish_numeric(METRIC_CHANNELS, count_live_channels(videobridge))

    def channel_created(self, channel: RtpChannel | None) -> None:
        self._publish_channel_count("channel created", channel)

    def channel_expired(self, channel: Channel | None) -> None:
        self._publish_channel_count("channel expired", channel)

    def channel_started_streaming(self, channel: RtpChannel | None) -> None:
        address = channel.stream_target_address if channel is not None else None
        if skip_missing(
            "channel started streaming", channel=channel, stream_target=address
        ):
            return
        cls = type(self)
        self.publish_string(
            f"{cls.__module__}.{cls.__qualname__}{METRIC_CHANNEL_START_POSTFIX}",
            address,
        )

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
