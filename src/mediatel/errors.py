"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Error taxonomy for media session telemetry.
"""

from __future__ import annotations


class MediatelError(RuntimeError):
    """Base class for telemetry pipeline errors."""


class ConfigurationError(MediatelError):
    """Raised when a required telemetry setting is missing or invalid."""

    def __init__(self, setting: str, message: str | None = None) -> None:
        self.setting = setting
        super().__init__(message or f"Required property not set: {setting}")


class TransportError(MediatelError):
    """Raised when a time-series POST fails or returns a non-200 status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class MetricPublisherError(MediatelError):
    """Raised when metric publisher registration/resolution fails."""
