"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Registry for pluggable metric publishers.
"""

from __future__ import annotations

from collections.abc import Mapping
from threading import Lock
from typing import Any, Protocol

from ..errors import MetricPublisherError
from .publisher import MetricServicePublisher


class MetricPublisherFactory(Protocol):
    """Provider contract used to construct metric publishers."""

    publisher_id: str

    def create_publisher(
        self,
        *,
        config: Mapping[str, Any] | None = None,
    ) -> MetricServicePublisher:
        """Create one publisher instance from publisher config."""
        ...


_FACTORIES: dict[str, MetricPublisherFactory] = {}
_LOCK = Lock()


def _key(publisher_id: str) -> str:
    return str(publisher_id).strip().lower()


def register_metric_publisher(factory: MetricPublisherFactory) -> None:
    """Register one publisher factory by its stable publisher id."""
    publisher_id = _key(factory.publisher_id)
    if not publisher_id:
        raise MetricPublisherError("Metric publisher id must be non-empty")
    with _LOCK:
        _FACTORIES[publisher_id] = factory


def get_metric_publisher_factory(publisher_id: str) -> MetricPublisherFactory:
    """Resolve one publisher factory by id."""
    with _LOCK:
        factory = _FACTORIES.get(_key(publisher_id))
    if factory is None:
        raise MetricPublisherError(f"Unknown metric publisher '{publisher_id}'")
    return factory


def list_metric_publishers() -> list[str]:
    """Return sorted list of registered publisher ids."""
    with _LOCK:
        return sorted(_FACTORIES.keys())


def create_metric_publisher(
    publisher_id: str,
    *,
    config: Mapping[str, Any] | None = None,
) -> MetricServicePublisher:
    """
    Construct a publisher from its registered id.

    Args:
        publisher_id: Registered id (`null`, `inmemory`, `logging`,
            `prometheus`, `otel`, or a custom one).
        config: Optional publisher-specific configuration payload.

    Raises:
        MetricPublisherError: If the id is not registered.
    """
    return get_metric_publisher_factory(publisher_id).create_publisher(config=config)
