"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Wiring of the installed logging service from settings.
"""

from __future__ import annotations

import logging

from .config import MetricSettings, TimeSeriesSettings
from .errors import ConfigurationError
from .metrics import MetricService
from .services import (
    CompositeLoggingService,
    LoggingService,
    NullLoggingService,
    TimeSeriesLoggingService,
)

logger = logging.getLogger("mediatel.bootstrap")


def create_logging_service(
    timeseries: TimeSeriesSettings | None = None,
    metrics: MetricSettings | None = None,
) -> LoggingService:
    """
    Build the service the session model should notify.

    Settings default to the `MEDIATEL_*` environment variables. A disabled or
    misconfigured time-series sink is simply not installed; when nothing is
    enabled a `NullLoggingService` is returned so callers can always notify.
    """
    metrics = metrics or MetricSettings.from_env()
    services: list[LoggingService] = []

    try:
        timeseries = timeseries or TimeSeriesSettings.from_env()
        if timeseries.enabled:
            services.append(TimeSeriesLoggingService.from_settings(timeseries))
    except ConfigurationError as exc:
        logger.error("Time-series logging disabled: %s", exc)

    if metrics.enabled:
        services.append(MetricService.from_settings(metrics))

    if not services:
        return NullLoggingService()
    if len(services) == 1:
        return services[0]
    return CompositeLoggingService(services)
