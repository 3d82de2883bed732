"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Metric fan-out to pluggable publishers.

Quick start::

    from mediatel.metrics import MetricService, create_metric_publisher

    service = MetricService([create_metric_publisher("logging")])
    service.publish_numeric("Conferences", 3)
"""

from .derived import count_live_channels, count_live_conferences
from .publisher import (
    BaseMetricPublisher,
    MetricServicePublisher,
    PublishOutcome,
    PublishResult,
)
from .publishers import (
    InMemoryMetricPublisher,
    InMemoryMetricPublisherFactory,
    LoggingMetricPublisher,
    LoggingMetricPublisherFactory,
    NullMetricPublisher,
    NullMetricPublisherFactory,
    OpenTelemetryMetricPublisher,
    OpenTelemetryMetricPublisherFactory,
    PrometheusMetricPublisher,
    PrometheusMetricPublisherFactory,
)
from .registry import (
    MetricPublisherFactory,
    create_metric_publisher,
    get_metric_publisher_factory,
    list_metric_publishers,
    register_metric_publisher,
)
from .service import MetricService
from .transactions import TransactionClock

# Register built-ins at import time.
register_metric_publisher(NullMetricPublisherFactory())
register_metric_publisher(InMemoryMetricPublisherFactory())
register_metric_publisher(LoggingMetricPublisherFactory())
register_metric_publisher(PrometheusMetricPublisherFactory())
register_metric_publisher(OpenTelemetryMetricPublisherFactory())

__all__ = [
    "MetricService",
    "MetricServicePublisher",
    "BaseMetricPublisher",
    "PublishOutcome",
    "PublishResult",
    "TransactionClock",
    "MetricPublisherFactory",
    "register_metric_publisher",
    "get_metric_publisher_factory",
    "list_metric_publishers",
    "create_metric_publisher",
    "count_live_conferences",
    "count_live_channels",
    "NullMetricPublisher",
    "InMemoryMetricPublisher",
    "LoggingMetricPublisher",
    "PrometheusMetricPublisher",
    "OpenTelemetryMetricPublisher",
    "NullMetricPublisherFactory",
    "InMemoryMetricPublisherFactory",
    "LoggingMetricPublisherFactory",
    "PrometheusMetricPublisherFactory",
    "OpenTelemetryMetricPublisherFactory",
]
