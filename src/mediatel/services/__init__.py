"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Lifecycle notification services.
"""

from .base import (
    CompositeLoggingService,
    LoggingService,
    NullLoggingService,
    first_missing,
    skip_missing,
)
from .timeseries import TimeSeriesLoggingService

__all__ = [
    "LoggingService",
    "NullLoggingService",
    "CompositeLoggingService",
    "TimeSeriesLoggingService",
    "first_missing",
    "skip_missing",
]
