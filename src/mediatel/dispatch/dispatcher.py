"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Non-blocking dispatcher that delivers encoded payloads on worker threads.
"""

from __future__ import annotations

import itertools
import logging
import threading
from collections import deque
from dataclasses import dataclass

from ..config import DispatcherSettings
from ..errors import TransportError
from .transport import SeriesTransport

logger = logging.getLogger("mediatel.dispatch")


@dataclass(frozen=True, slots=True)
class DispatchStats:
    """Point-in-time dispatcher counters."""

    submitted: int
    sent: int
    failed: int
    dropped: int
    queued: int
    in_flight: int
    workers: int


class AsyncDispatcher:
    """
    Fire-and-forget delivery of payloads through a `SeriesTransport`.

    `dispatch()` only enqueues. Worker threads are started on demand up to
    `max_workers` and exit after `idle_timeout_s` without work. The queue is
    bounded; when full, `overflow_policy` decides whether the oldest queued
    payload or the new one is discarded. Transport failures are logged and the
    payload is dropped. Delivery order is not guaranteed.
    """

    def __init__(
        self,
        transport: SeriesTransport,
        *,
        settings: DispatcherSettings | None = None,
        name: str = "mediatel-dispatch",
    ) -> None:
        self._transport = transport
        self._settings = settings or DispatcherSettings()
        if self._settings.max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        if self._settings.max_queue_size < 1:
            raise ValueError("max_queue_size must be >= 1")
        self._name = name
        self._ids = itertools.count(1)

        self._lock = threading.Lock()
        self._work = threading.Condition(self._lock)
        self._done = threading.Condition(self._lock)
        self._queue: deque[str] = deque()
        self._workers: set[threading.Thread] = set()
        self._idle = 0
        self._in_flight = 0
        self._closed = False

        self._submitted = 0
        self._sent = 0
        self._failed = 0
        self._dropped = 0

    def dispatch(self, payload: str) -> bool:
        """
        Queue one payload for delivery and return immediately.

        Returns:
            ``False`` when the payload was discarded (dispatcher closed, or the
            queue was full under the ``drop_newest`` policy).
        """
        with self._lock:
            if self._closed:
                self._dropped += 1
                logger.debug("Dispatcher %s is closed; payload dropped", self._name)
                return False
            self._submitted += 1
            if len(self._queue) >= self._settings.max_queue_size:
                self._dropped += 1
                if self._settings.overflow_policy == "drop_newest":
                    logger.warning(
                        "Dispatch queue full (%d); dropping newest payload",
                        self._settings.max_queue_size,
                    )
                    return False
                self._queue.popleft()
                logger.warning(
                    "Dispatch queue full (%d); dropping oldest payload",
                    self._settings.max_queue_size,
                )
            self._queue.append(payload)
            if (
                len(self._queue) > self._idle
                and len(self._workers) < self._settings.max_workers
            ):
                self._spawn_worker()
            self._work.notify()
        return True

    def _spawn_worker(self) -> None:
        thread = threading.Thread(
            target=self._run_worker,
            name=f"{self._name}-{next(self._ids)}",
            daemon=True,
        )
        self._workers.add(thread)
        thread.start()

    def _run_worker(self) -> None:
        current = threading.current_thread()
        while True:
            with self._lock:
                self._idle += 1
                while not self._queue and not self._closed:
                    if not self._work.wait(timeout=self._settings.idle_timeout_s):
                        if not self._queue:
                            break
                self._idle -= 1
                if not self._queue:
                    self._workers.discard(current)
                    self._done.notify_all()
                    return
                payload = self._queue.popleft()
                self._in_flight += 1

            ok = self._deliver(payload)

            with self._lock:
                self._in_flight -= 1
                if ok:
                    self._sent += 1
                else:
                    self._failed += 1
                self._done.notify_all()

    def _deliver(self, payload: str) -> bool:
        try:
            self._transport.post(payload)
            return True
        except TransportError as exc:
            logger.info("Failed to post to time-series backend: %s", exc)
        except Exception:
            logger.exception("Unexpected error while posting series payload")
        return False

    def drain(self, timeout: float | None = None) -> bool:
        """Wait until the queue is empty and no delivery is in flight."""
        with self._lock:
            return self._done.wait_for(
                lambda: not self._queue and self._in_flight == 0,
                timeout=timeout,
            )

    def close(self, timeout: float | None = None) -> None:
        """Stop accepting payloads, let workers flush the queue, then join them."""
        with self._lock:
            self._closed = True
            self._work.notify_all()
            workers = list(self._workers)
        for thread in workers:
            thread.join(timeout)
        logger.info("Dispatcher %s shut down", self._name)

    def stats(self) -> DispatchStats:
        with self._lock:
            return DispatchStats(
                submitted=self._submitted,
                sent=self._sent,
                failed=self._failed,
                dropped=self._dropped,
                queued=len(self._queue),
                in_flight=self._in_flight,
                workers=len(self._workers),
            )
