"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

In-memory metric publisher for tests and local debugging.
"""

from __future__ import annotations

from collections.abc import Mapping
from threading import Lock
from typing import Any

from ..publisher import BaseMetricPublisher, MetricServicePublisher, PublishResult
from ..transactions import TransactionClock


class InMemoryMetricPublisher(BaseMetricPublisher):
    """Publisher that stores every metric write in process memory."""

    publisher_id = "inmemory"

    def __init__(self, *, transactions: TransactionClock | None = None) -> None:
        self._lock = Lock()
        self._numeric: list[tuple[str, int | float]] = []
        self._strings: list[tuple[str, str]] = []
        self._counters: dict[str, int] = {}
        self._durations: list[dict[str, Any]] = []
        self._transactions = transactions or TransactionClock()

    def publish_numeric(self, name: str, value: int | float) -> PublishResult:
        with self._lock:
            self._numeric.append((name, value))
        return PublishResult.success()

    def publish_string(self, name: str, value: str) -> PublishResult:
        with self._lock:
            self._strings.append((name, value))
        return PublishResult.success()

    def publish_incremental(self, name: str, delta: int = 1) -> PublishResult:
        with self._lock:
            self._counters[name] = self._counters.get(name, 0) + int(delta)
        return PublishResult.success()

    def start_transaction(self, transaction_type: str, transaction_id: str) -> PublishResult:
        self._transactions.start(transaction_type, transaction_id)
        return PublishResult.success()

    def end_transaction(self, transaction_type: str, transaction_id: str) -> PublishResult:
        duration = self._transactions.stop(transaction_type, transaction_id)
        if duration is None:
            return PublishResult.success()
        with self._lock:
            self._durations.append(
                {
                    "type": transaction_type,
                    "id": transaction_id,
                    "duration_s": duration,
                }
            )
        return PublishResult.success()

    def numeric(self) -> list[tuple[str, int | float]]:
        with self._lock:
            return list(self._numeric)

    def last_numeric(self, name: str) -> int | float | None:
        with self._lock:
            for metric, value in reversed(self._numeric):
                if metric == name:
                    return value
        return None

    def strings(self) -> list[tuple[str, str]]:
        with self._lock:
            return list(self._strings)

    def counters(self) -> dict[str, int]:
        with self._lock:
            return dict(self._counters)

    def durations(self) -> list[dict[str, Any]]:
        with self._lock:
            return list(self._durations)


class InMemoryMetricPublisherFactory:
    """Factory for the in-memory publisher."""

    publisher_id = "inmemory"

    def create_publisher(
        self,
        *,
        config: Mapping[str, Any] | None = None,
    ) -> MetricServicePublisher:
        _ = config
        return InMemoryMetricPublisher()
