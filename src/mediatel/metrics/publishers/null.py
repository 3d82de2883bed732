"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

No-op metric publisher.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..publisher import BaseMetricPublisher, MetricServicePublisher


class NullMetricPublisher(BaseMetricPublisher):
    """Publisher that supports nothing; every call reports unsupported."""

    publisher_id = "null"


class NullMetricPublisherFactory:
    """Factory for the no-op publisher."""

    publisher_id = "null"

    def create_publisher(
        self,
        *,
        config: Mapping[str, Any] | None = None,
    ) -> MetricServicePublisher:
        _ = config
        return NullMetricPublisher()
