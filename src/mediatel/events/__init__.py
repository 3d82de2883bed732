"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Event model, factory and time-series encoder.

Quick start::

    from mediatel.events import TimeSeriesEncoder, factory

    event = factory.conference_created("conf1", focus=None)
    body = TimeSeriesEncoder().encode_json(event)
"""

from . import factory
from .encoder import SeriesPayload, TimeSeriesEncoder, now_ms
from .models import Event, Row, Scalar, make_event, render_value

__all__ = [
    "Event",
    "Row",
    "Scalar",
    "make_event",
    "render_value",
    "factory",
    "SeriesPayload",
    "TimeSeriesEncoder",
    "now_ms",
]
