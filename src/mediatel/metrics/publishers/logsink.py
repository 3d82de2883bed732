"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Metric publisher that writes metrics to a standard logger.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..publisher import BaseMetricPublisher, MetricServicePublisher, PublishResult
from ..transactions import TransactionClock


class LoggingMetricPublisher(BaseMetricPublisher):
    """Log every metric write at a fixed level."""

    publisher_id = "logging"

    def __init__(
        self,
        *,
        logger_name: str = "mediatel.metrics.published",
        level: int = logging.INFO,
    ) -> None:
        self._logger = logging.getLogger(logger_name)
        self._level = level
        self._transactions = TransactionClock()

    def publish_numeric(self, name: str, value: int | float) -> PublishResult:
        self._logger.log(self._level, "metric %s=%s", name, value)
        return PublishResult.success()

    def publish_string(self, name: str, value: str) -> PublishResult:
        self._logger.log(self._level, "metric %s=%r", name, value)
        return PublishResult.success()

    def publish_incremental(self, name: str, delta: int = 1) -> PublishResult:
        self._logger.log(self._level, "metric %s+=%d", name, delta)
        return PublishResult.success()

    def start_transaction(self, transaction_type: str, transaction_id: str) -> PublishResult:
        self._transactions.start(transaction_type, transaction_id)
        return PublishResult.success()

    def end_transaction(self, transaction_type: str, transaction_id: str) -> PublishResult:
        duration = self._transactions.stop(transaction_type, transaction_id)
        if duration is not None:
            self._logger.log(
                self._level,
                "transaction %s[%s] took %.3fs",
                transaction_type,
                transaction_id,
                duration,
            )
        return PublishResult.success()


class LoggingMetricPublisherFactory:
    """Factory for the logging publisher; honors `logger_name` and `level`."""

    publisher_id = "logging"

    def create_publisher(
        self,
        *,
        config: Mapping[str, Any] | None = None,
    ) -> MetricServicePublisher:
        conf = dict(config or {})
        level = conf.get("level", logging.INFO)
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
        return LoggingMetricPublisher(
            logger_name=str(conf.get("logger_name", "mediatel.metrics.published")),
            level=int(level),
        )
