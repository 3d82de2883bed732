"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Metric publisher capability and typed publish results.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class PublishOutcome(str, Enum):
    OK = "ok"
    UNSUPPORTED = "unsupported"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class PublishResult:
    """Outcome of one publisher operation."""

    outcome: PublishOutcome
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is PublishOutcome.OK

    @classmethod
    def success(cls) -> "PublishResult":
        return _OK

    @classmethod
    def unsupported(cls) -> "PublishResult":
        return _UNSUPPORTED

    @classmethod
    def failed(cls, error: BaseException) -> "PublishResult":
        return cls(PublishOutcome.FAILED, error)


_OK = PublishResult(PublishOutcome.OK)
_UNSUPPORTED = PublishResult(PublishOutcome.UNSUPPORTED)


class MetricServicePublisher(Protocol):
    """
    Backend that accepts metric writes.

    A publisher may support only a subset of metric kinds; unsupported
    operations return `PublishResult.unsupported()`.
    """

    @property
    def name(self) -> str: ...

    def publish_numeric(self, name: str, value: int | float) -> PublishResult: ...

    def publish_string(self, name: str, value: str) -> PublishResult: ...

    def publish_incremental(self, name: str, delta: int = 1) -> PublishResult: ...

    def start_transaction(self, transaction_type: str, transaction_id: str) -> PublishResult: ...

    def end_transaction(self, transaction_type: str, transaction_id: str) -> PublishResult: ...


class BaseMetricPublisher:
    """Publisher base where every operation is unsupported until overridden."""

    publisher_id = "base"

    @property
    def name(self) -> str:
        return self.publisher_id

    def publish_numeric(self, name: str, value: int | float) -> PublishResult:
        return PublishResult.unsupported()

    def publish_string(self, name: str, value: str) -> PublishResult:
        return PublishResult.unsupported()

    def publish_incremental(self, name: str, delta: int = 1) -> PublishResult:
        return PublishResult.unsupported()

    def start_transaction(self, transaction_type: str, transaction_id: str) -> PublishResult:
        return PublishResult.unsupported()

    def end_transaction(self, transaction_type: str, transaction_id: str) -> PublishResult:
        return PublishResult.unsupported()
