"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Start-time bookkeeping for measured transactions.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from threading import Lock


class TransactionClock:
    """Track open transactions keyed by ``(type, id)`` and measure them."""

    def __init__(self, *, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.monotonic
        self._started: dict[tuple[str, str], float] = {}
        self._lock = Lock()

    def start(self, transaction_type: str, transaction_id: str) -> None:
        with self._lock:
            self._started[(transaction_type, transaction_id)] = self._clock()

    def stop(self, transaction_type: str, transaction_id: str) -> float | None:
        """Close a transaction and return its duration in seconds, if it was open."""
        with self._lock:
            started = self._started.pop((transaction_type, transaction_id), None)
        if started is None:
            return None
        return max(0.0, self._clock() - started)

    def open_count(self) -> int:
        with self._lock:
            return len(self._started)
