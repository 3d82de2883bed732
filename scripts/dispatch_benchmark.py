#!/usr/bin/env python3
"""
Dispatcher benchmark utility for throughput and drop-rate characterization.

Usage examples:
  PYTHONPATH=src python scripts/dispatch_benchmark.py
  PYTHONPATH=src python scripts/dispatch_benchmark.py --workers 2 --max-queue 64 --latency-ms 20
"""

from __future__ import annotations

import argparse
import statistics
import threading
import time

from mediatel.config import DispatcherSettings
from mediatel.dispatch import AsyncDispatcher
from mediatel.events import TimeSeriesEncoder, factory


class SleepTransport:
    """Transport that simulates a slow series endpoint."""

    def __init__(self, latency_ms: float) -> None:
        self._latency_s = latency_ms / 1000.0
        self._lock = threading.Lock()
        self.post_durations: list[float] = []

    def post(self, payload: str) -> None:
        _ = payload
        started = time.monotonic()
        time.sleep(self._latency_s)
        with self._lock:
            self.post_durations.append(time.monotonic() - started)


def run_benchmark(
    *,
    num_events: int,
    workers: int,
    max_queue: int,
    overflow: str,
    latency_ms: float,
) -> None:
    transport = SleepTransport(latency_ms=latency_ms)
    dispatcher = AsyncDispatcher(
        transport,
        settings=DispatcherSettings(
            max_workers=workers,
            max_queue_size=max_queue,
            overflow_policy=overflow,  # type: ignore[arg-type]
        ),
    )
    encoder = TimeSeriesEncoder()

    started = time.time()
    submit_durations: list[float] = []
    for i in range(num_events):
        payload = encoder.encode_json(factory.conference_created(f"conf{i}", None))
        before = time.monotonic()
        dispatcher.dispatch(payload)
        submit_durations.append(time.monotonic() - before)

    dispatcher.drain(timeout=120)
    elapsed = time.time() - started
    stats = dispatcher.stats()
    dispatcher.close(timeout=5)

    throughput = stats.sent / elapsed if elapsed > 0 else 0.0
    submit_p50 = statistics.median(submit_durations) if submit_durations else 0.0
    submit_max = max(submit_durations) if submit_durations else 0.0

    print(f"events={num_events}")
    print(f"workers={workers}")
    print(f"max_queue={max_queue}")
    print(f"overflow={overflow}")
    print(f"post_latency_ms={latency_ms:.2f}")
    print(f"elapsed_s={elapsed:.3f}")
    print(f"sent={stats.sent}")
    print(f"dropped={stats.dropped}")
    print(f"throughput_eps={throughput:.2f}")
    print(f"dispatch_p50_us={submit_p50 * 1e6:.2f}")
    print(f"dispatch_max_us={submit_max * 1e6:.2f}")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dispatcher benchmark utility")
    parser.add_argument("--num-events", type=int, default=500)
    parser.add_argument("--workers", type=int, default=4)
    parser.add_argument("--max-queue", type=int, default=1024)
    parser.add_argument(
        "--overflow", choices=("drop_oldest", "drop_newest"), default="drop_oldest"
    )
    parser.add_argument("--latency-ms", type=float, default=5.0)
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    run_benchmark(
        num_events=args.num_events,
        workers=args.workers,
        max_queue=args.max_queue,
        overflow=args.overflow,
        latency_ms=args.latency_ms,
    )


if __name__ == "__main__":
    main()
