"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

HTTP transport for time-series series payloads.
"""

from __future__ import annotations

from typing import Protocol

import httpx

from ..errors import TransportError


class SeriesTransport(Protocol):
    """Delivers one encoded payload; raises `TransportError` on failure."""

    def post(self, payload: str) -> None: ...


class HttpSeriesTransport:
    """
    POST encoded payloads to a pre-built series URL.

    One request per payload: no retry, no batching. A non-200 response or any
    `httpx` error is reported as `TransportError`.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_s: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._client = client or httpx.Client(timeout=timeout_s)

    def post(self, payload: str) -> None:
        try:
            response = self._client.post(
                self._url,
                content=payload.encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"Failed to post series payload: {exc}") from exc
        if response.status_code != 200:
            raise TransportError(
                f"HTTP response code: {response.status_code}",
                status_code=response.status_code,
            )

    def close(self) -> None:
        self._client.close()
