"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Asynchronous delivery of encoded time-series payloads.
"""

from .dispatcher import AsyncDispatcher, DispatchStats
from .transport import HttpSeriesTransport, SeriesTransport

__all__ = [
    "AsyncDispatcher",
    "DispatchStats",
    "HttpSeriesTransport",
    "SeriesTransport",
]
