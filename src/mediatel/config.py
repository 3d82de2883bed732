"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Telemetry settings and explicit config loading.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from .errors import ConfigurationError

OverflowPolicy = Literal["drop_oldest", "drop_newest"]

INFLUX_ENABLED_ENV = "MEDIATEL_INFLUX_ENABLED"
INFLUX_URL_BASE_ENV = "MEDIATEL_INFLUX_URL_BASE"
INFLUX_DATABASE_ENV = "MEDIATEL_INFLUX_DATABASE"
INFLUX_USER_ENV = "MEDIATEL_INFLUX_USER"
INFLUX_PASS_ENV = "MEDIATEL_INFLUX_PASS"
HTTP_TIMEOUT_ENV = "MEDIATEL_HTTP_TIMEOUT_S"
DISPATCH_MAX_WORKERS_ENV = "MEDIATEL_DISPATCH_MAX_WORKERS"
DISPATCH_MAX_QUEUE_ENV = "MEDIATEL_DISPATCH_MAX_QUEUE"
DISPATCH_OVERFLOW_ENV = "MEDIATEL_DISPATCH_OVERFLOW"

METRICS_ENABLED_ENV = "MEDIATEL_METRICS_ENABLED"
METRIC_PUBLISHER_PREFIX = "MEDIATEL_METRIC_PUBLISHER_"

_TRUE = {"1", "true", "yes", "on"}


def _get(props: Mapping[str, str], name: str, default: str | None = None) -> str | None:
    """Return the stripped value of `name`, or `default` when unset/blank."""
    raw = props.get(name)
    if raw is None:
        return default
    value = str(raw).strip()
    return value or default


def _flag(props: Mapping[str, str], name: str) -> bool:
    return (_get(props, name, "false") or "false").lower() in _TRUE


def _number(props: Mapping[str, str], name: str, default: str, cast: type) -> Any:
    raw = _get(props, name, default) or default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigurationError(name, f"Invalid value for {name}: '{raw}'") from None


def _overflow(value: str | None) -> OverflowPolicy:
    policy = (value or "drop_oldest").strip().lower()
    if policy not in ("drop_oldest", "drop_newest"):
        raise ConfigurationError(
            DISPATCH_OVERFLOW_ENV,
            f"Unknown {DISPATCH_OVERFLOW_ENV} policy '{value}'",
        )
    return policy  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class DispatcherSettings:
    """
    Worker pool and queue bounds for the async dispatcher.

    Attributes:
        max_workers: Upper bound on concurrent POST threads.
        max_queue_size: Payloads buffered while all workers are busy.
        overflow_policy: Which payload is discarded when the queue is full.
        idle_timeout_s: Idle worker threads exit after this many seconds.
    """

    max_workers: int = 4
    max_queue_size: int = 1024
    overflow_policy: OverflowPolicy = "drop_oldest"
    idle_timeout_s: float = 60.0

    def validate(self) -> None:
        """
        Check the pool and queue bounds.

        Raises:
            ConfigurationError: If a bound is below 1.
        """
        if self.max_workers < 1:
            raise ConfigurationError(
                DISPATCH_MAX_WORKERS_ENV,
                f"{DISPATCH_MAX_WORKERS_ENV} must be >= 1, got {self.max_workers}",
            )
        if self.max_queue_size < 1:
            raise ConfigurationError(
                DISPATCH_MAX_QUEUE_ENV,
                f"{DISPATCH_MAX_QUEUE_ENV} must be >= 1, got {self.max_queue_size}",
            )


@dataclass(frozen=True, slots=True)
class TimeSeriesSettings:
    """Connection settings for the time-series logging sink."""

    enabled: bool = False
    url_base: str | None = None
    database: str | None = None
    user: str | None = None
    password: str | None = None
    timeout_s: float = 5.0
    dispatcher: DispatcherSettings = field(default_factory=DispatcherSettings)

    @staticmethod
    def from_mapping(props: Mapping[str, str]) -> "TimeSeriesSettings":
        """
        Load settings from a flat property mapping.

        Raises:
            ConfigurationError: If a numeric or policy setting cannot be parsed.
        """
        return TimeSeriesSettings(
            enabled=_flag(props, INFLUX_ENABLED_ENV),
            url_base=_get(props, INFLUX_URL_BASE_ENV),
            database=_get(props, INFLUX_DATABASE_ENV),
            user=_get(props, INFLUX_USER_ENV),
            password=_get(props, INFLUX_PASS_ENV),
            timeout_s=_number(props, HTTP_TIMEOUT_ENV, "5", float),
            dispatcher=DispatcherSettings(
                max_workers=_number(props, DISPATCH_MAX_WORKERS_ENV, "4", int),
                max_queue_size=_number(props, DISPATCH_MAX_QUEUE_ENV, "1024", int),
                overflow_policy=_overflow(_get(props, DISPATCH_OVERFLOW_ENV)),
            ),
        )

    @staticmethod
    def from_env() -> "TimeSeriesSettings":
        """Load settings from environment variables."""
        return TimeSeriesSettings.from_mapping(os.environ)

    def require_url(self) -> str:
        """
        Build the series POST URL with query-string credentials.

        Raises:
            ConfigurationError: If any connection setting is missing.
        """
        required = (
            (INFLUX_URL_BASE_ENV, self.url_base),
            (INFLUX_DATABASE_ENV, self.database),
            (INFLUX_USER_ENV, self.user),
            (INFLUX_PASS_ENV, self.password),
        )
        for name, value in required:
            if value is None:
                raise ConfigurationError(name)
        base = str(self.url_base).rstrip("/")
        return f"{base}/db/{self.database}/series?u={self.user}&p={self.password}"


@dataclass(frozen=True, slots=True)
class MetricSettings:
    """
    Metric fan-out settings.

    Publishers come from the namespaced list
    ``MEDIATEL_METRIC_PUBLISHER_<NAME>=<publisher id>``, ordered by key.
    """

    enabled: bool = False
    publishers: tuple[str, ...] = ()

    @staticmethod
    def from_mapping(props: Mapping[str, str]) -> "MetricSettings":
        names = sorted(key for key in props if key.startswith(METRIC_PUBLISHER_PREFIX))
        publishers = tuple(
            value
            for value in (_get(props, name) for name in names)
            if value is not None
        )
        return MetricSettings(
            enabled=_flag(props, METRICS_ENABLED_ENV),
            publishers=publishers,
        )

    @staticmethod
    def from_env() -> "MetricSettings":
        return MetricSettings.from_mapping(os.environ)
