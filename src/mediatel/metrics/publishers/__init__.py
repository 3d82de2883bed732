"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Built-in metric publishers.
"""

from .inmemory import InMemoryMetricPublisher, InMemoryMetricPublisherFactory
from .logsink import LoggingMetricPublisher, LoggingMetricPublisherFactory
from .null import NullMetricPublisher, NullMetricPublisherFactory
from .otel import OpenTelemetryMetricPublisher, OpenTelemetryMetricPublisherFactory
from .prometheus import PrometheusMetricPublisher, PrometheusMetricPublisherFactory

__all__ = [
    "NullMetricPublisher",
    "NullMetricPublisherFactory",
    "InMemoryMetricPublisher",
    "InMemoryMetricPublisherFactory",
    "LoggingMetricPublisher",
    "LoggingMetricPublisherFactory",
    "PrometheusMetricPublisher",
    "PrometheusMetricPublisherFactory",
    "OpenTelemetryMetricPublisher",
    "OpenTelemetryMetricPublisherFactory",
]
