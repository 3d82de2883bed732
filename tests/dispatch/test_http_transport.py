from __future__ import annotations

import httpx
import pytest

from mediatel.config import TimeSeriesSettings
from mediatel.dispatch import HttpSeriesTransport
from mediatel.errors import TransportError


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_post_sends_json_body_to_series_url():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200)

    url = TimeSeriesSettings(
        url_base="http://influx:8086",
        database="jvb",
        user="root",
        password="secret",
    ).require_url()
    transport = HttpSeriesTransport(url, client=_client(handler))
    transport.post('[{"name":"x","columns":[],"points":[[]]}]')

    [request] = seen
    assert request.method == "POST"
    assert str(request.url) == "http://influx:8086/db/jvb/series?u=root&p=secret"
    assert request.headers["content-type"] == "application/json"
    assert request.content == b'[{"name":"x","columns":[],"points":[[]]}]'


def test_non_200_response_raises_transport_error():
    transport = HttpSeriesTransport(
        "http://influx/db/d/series?u=u&p=p",
        client=_client(lambda request: httpx.Response(500)),
    )
    with pytest.raises(TransportError) as info:
        transport.post("[]")
    assert info.value.status_code == 500


def test_connection_error_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    transport = HttpSeriesTransport(
        "http://influx/db/d/series?u=u&p=p", client=_client(handler)
    )
    with pytest.raises(TransportError):
        transport.post("[]")
