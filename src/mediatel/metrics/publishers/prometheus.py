"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Prometheus-backed metric publisher.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from threading import Lock
from typing import Any

from ..publisher import BaseMetricPublisher, MetricServicePublisher, PublishResult
from ..transactions import TransactionClock

_INVALID = re.compile(r"[^a-zA-Z0-9_]+")


def metric_name(name: str) -> str:
    """Map a free-form metric name to a valid Prometheus metric name."""
    cleaned = _INVALID.sub("_", name.strip()).strip("_").lower()
    if not cleaned:
        return "unnamed"
    if cleaned[0].isdigit():
        return f"_{cleaned}"
    return cleaned


class PrometheusMetricPublisher(BaseMetricPublisher):
    """
    Numeric metrics become gauges, incremental metrics counters and measured
    transactions histograms of seconds. String metrics are unsupported.

    Requires `prometheus_client` package.
    """

    publisher_id = "prometheus"

    def __init__(self, *, namespace: str = "mediatel", registry: Any = None) -> None:
        try:
            import prometheus_client
        except ModuleNotFoundError as exc:  # pragma: no cover
            raise RuntimeError(
                "PrometheusMetricPublisher requires `prometheus_client` to be installed."
            ) from exc

        self._prom = prometheus_client
        self._namespace = namespace
        self._registry = registry if registry is not None else prometheus_client.REGISTRY
        self._collectors: dict[tuple[str, str], Any] = {}
        self._lock = Lock()
        self._transactions = TransactionClock()

    def _collector(self, kind: str, name: str) -> Any:
        key = (kind, name)
        with self._lock:
            collector = self._collectors.get(key)
            if collector is None:
                cls = {
                    "gauge": self._prom.Gauge,
                    "counter": self._prom.Counter,
                    "histogram": self._prom.Histogram,
                }[kind]
                collector = cls(
                    name=metric_name(name),
                    documentation=f"Media session metric {name}",
                    namespace=self._namespace,
                    registry=self._registry,
                )
                self._collectors[key] = collector
        return collector

    def publish_numeric(self, name: str, value: int | float) -> PublishResult:
        try:
            self._collector("gauge", name).set(value)
        except ValueError as exc:
            return PublishResult.failed(exc)
        return PublishResult.success()

    def publish_incremental(self, name: str, delta: int = 1) -> PublishResult:
        try:
            self._collector("counter", name).inc(delta)
        except ValueError as exc:
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
            self._collector("histogram", f"{transaction_type} seconds").observe(duration)
        except ValueError as exc:
            return PublishResult.failed(exc)
        return PublishResult.success()


class PrometheusMetricPublisherFactory:
    """Factory for the Prometheus publisher; honors `namespace`."""

    publisher_id = "prometheus"

    def create_publisher(
        self,
        *,
        config: Mapping[str, Any] | None = None,
    ) -> MetricServicePublisher:
        conf = dict(config or {})
        return PrometheusMetricPublisher(
            namespace=str(conf.get("namespace", "mediatel")),
            registry=conf.get("registry"),
        )
