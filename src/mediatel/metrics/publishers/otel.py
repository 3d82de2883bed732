"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

OpenTelemetry metric publisher for enterprise telemetry pipelines.
"""

from __future__ import annotations

from collections.abc import Mapping
from threading import Lock
from typing import Any

from ..publisher import BaseMetricPublisher, MetricServicePublisher, PublishResult
from ..transactions import TransactionClock


class OpenTelemetryMetricPublisher(BaseMetricPublisher):
    """
    OpenTelemetry publisher with lazy meter initialization.

    Numeric values are reported as up-down counter deltas against the last
    published value, incremental metrics as counters and measured transactions
    as millisecond histograms. String metrics are unsupported.
    """

    publisher_id = "otel"

    def __init__(self, *, meter_name: str = "mediatel.metrics", meter: Any = None) -> None:
        self._meter_name = meter_name
        self._meter = meter
        self._instruments: dict[tuple[str, str], Any] = {}
        self._last_numeric: dict[str, float] = {}
        self._lock = Lock()
        self._transactions = TransactionClock()

    def _ensure_meter(self) -> Any:
        if self._meter is not None:
            return self._meter
        try:
            from opentelemetry import metrics
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(
                "OpenTelemetryMetricPublisher requires 'opentelemetry-api'"
            ) from exc
        self._meter = metrics.get_meter(self._meter_name)
        return self._meter

    def _instrument(self, kind: str, name: str) -> Any:
        key = (kind, name)
        instrument = self._instruments.get(key)
        if instrument is None:
            meter = self._ensure_meter()
            if kind == "updown":
                instrument = meter.create_up_down_counter(name)
            elif kind == "counter":
                instrument = meter.create_counter(name)
            else:
                instrument = meter.create_histogram(name, unit="ms")
            self._instruments[key] = instrument
        return instrument

    def publish_numeric(self, name: str, value: int | float) -> PublishResult:
        try:
            with self._lock:
                previous = self._last_numeric.get(name, 0.0)
                self._last_numeric[name] = float(value)
                self._instrument("updown", name).add(float(value) - previous)
        except Exception as exc:
            return PublishResult.failed(exc)
        return PublishResult.success()

    def publish_incremental(self, name: str, delta: int = 1) -> PublishResult:
        try:
            with self._lock:
                self._instrument("counter", name).add(int(delta))
        except Exception as exc:
            return PublishResult.failed(exc)
        return PublishResult.success()

    def start_transaction(self, transaction_type: str, transaction_id: str) -> PublishResult:
        self._transactions.start(transaction_type, transaction_id)
        return PublishResult.success()

    def end_transaction(self, transaction_type: str, transaction_id: str) -> PublishResult:
        duration = self._transactions.stop(transaction_type, transaction_id)
        if duration is None:
            return PublishResult.success()
        try:
            with self._lock:
                histogram = self._instrument("histogram", transaction_type)
            histogram.record(duration * 1000.0, attributes={"transaction": transaction_type})
        except Exception as exc:
            return PublishResult.failed(exc)
        return PublishResult.success()


class OpenTelemetryMetricPublisherFactory:
    """Factory for the OpenTelemetry publisher."""

    publisher_id = "otel"

    def create_publisher(
        self,
        *,
        config: Mapping[str, Any] | None = None,
    ) -> MetricServicePublisher:
        conf = dict(config or {})
        return OpenTelemetryMetricPublisher(
            meter_name=str(conf.get("meter_name", "mediatel.metrics")),
            meter=conf.get("meter"),
        )
