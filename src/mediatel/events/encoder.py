"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Encoding of events into the time-series series JSON format.

Sample payload::

    [
      {
        "name": "series_name",
        "columns": ["time", "column1", "column2"],
        "points": [
          [1434121230000, "value1", 1234],
          [1434121230000, "value2", 5678]
        ]
      }
    ]
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, TypeAdapter

from ..contracts import TIME_COLUMN
from .models import Event, Scalar


def now_ms() -> int:
    """Return current Unix epoch time in milliseconds."""

    return int(time.time() * 1000)


class SeriesPayload(BaseModel):
    """One series entry of the wire payload."""

    name: str
    columns: list[str]
    points: list[list[Scalar]]


_PAYLOAD_ADAPTER = TypeAdapter(list[SeriesPayload])


class TimeSeriesEncoder:
    """
    Serialize `Event` records for the time-series backend.

    The capture timestamp is taken once per event and shared by every row of
    a multi-point event so points posted together stay coherent. Column and
    row arity are not validated.
    """

    def __init__(self, *, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or now_ms

    def to_payload(self, event: Event) -> SeriesPayload:
        columns: list[str] = []
        if event.use_local_time:
            columns.append(TIME_COLUMN)
        columns.extend(event.columns)

        now = self._clock() if event.use_local_time else None
        points: list[list[Scalar]] = []
        for row in event.rows():
            point: list[Scalar] = []
            if now is not None:
                point.append(now)
            point.extend(row)
            points.append(point)

        return SeriesPayload(name=event.name, columns=columns, points=points)

    def encode(self, event: Event) -> list[dict[str, Any]]:
        """Return the JSON-compatible document for one event."""
        return _PAYLOAD_ADAPTER.dump_python([self.to_payload(event)], mode="json")

    def encode_json(self, event: Event) -> str:
        """Return the compact JSON string POSTed for one event."""
        return _PAYLOAD_ADAPTER.dump_json([self.to_payload(event)]).decode("utf-8")
