from __future__ import annotations

import logging

import httpx
import pytest

from massive_stocks.application import stocks
from massive_stocks.core.errors import RequestError
from massive_stocks.infrastructure.clients.massive import MassiveRestClient


def _build_client(handler, **kwargs) -> MassiveRestClient:
    return MassiveRestClient("test-key", transport=httpx.MockTransport(handler), **kwargs)


def test_rejects_missing_api_key() -> None:
    with pytest.raises(ValueError, match="not configured"):
        MassiveRestClient("")


def test_get_json_sends_uri_against_base_url_with_bearer_token() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"status": "OK", "resultsCount": 1})

    client = _build_client(handler, base_url="https://api.example.test/")

    result = client.get_json("/v2/snapshot/locale/us/markets/stocks/tickers?tickers=AAPL%2CMSFT")

    assert result == {"status": "OK", "resultsCount": 1}
    assert len(requests) == 1
    request = requests[0]
    assert request.method == "GET"
    assert request.url.host == "api.example.test"
    assert request.url.path == "/v2/snapshot/locale/us/markets/stocks/tickers"
    assert request.url.query == b"tickers=AAPL%2CMSFT"
    assert request.headers["Authorization"] == "Bearer test-key"


def test_get_json_returns_decoded_list_unmodified() -> None:
    client = _build_client(lambda request: httpx.Response(200, json=[{"T": "AAPL"}, {"T": "MSFT"}]))

    assert client.get_json("/v2/aggs/grouped/locale/us/market/stocks/2023-01-09") == [
        {"T": "AAPL"},
        {"T": "MSFT"},
    ]


def test_get_json_raises_request_error_on_non_2xx(caplog: pytest.LogCaptureFixture) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"status": "ERROR", "error": "rate limited"})

    client = _build_client(handler)

    with caplog.at_level(logging.WARNING), pytest.raises(RequestError) as exc_info:
        client.get_json("/v2/last/trade/AAPL")

    error = exc_info.value
    assert error.status_code == 429
    assert error.uri == "/v2/last/trade/AAPL"
    assert "rate limited" in (error.body or "")
    assert isinstance(error.__cause__, httpx.HTTPStatusError)
    assert "status 429" in caplog.text


def test_get_json_wraps_transport_failures() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _build_client(handler)

    with pytest.raises(RequestError) as exc_info:
        client.get_json("/v2/last/nbbo/AAPL")

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_get_json_rejects_non_json_body(caplog: pytest.LogCaptureFixture) -> None:
    client = _build_client(lambda request: httpx.Response(200, text="<html>maintenance</html>"))

    with caplog.at_level(logging.WARNING), pytest.raises(RequestError, match="non-JSON"):
        client.get_json("/v2/last/nbbo/AAPL")

    assert "not valid JSON" in caplog.text


def test_endpoint_round_trip_through_http_adapter() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(f"{request.url.path}?{request.url.query.decode()}")
        return httpx.Response(200, json={"ticker": "AAPL", "results": [{"o": 115.55}]})

    with _build_client(handler) as client:
        result = stocks.previous_close("AAPL", adjusted=True, client=client)

    assert result == {"ticker": "AAPL", "results": [{"o": 115.55}]}
    assert seen == ["/v2/aggs/ticker/AAPL/prev?adjusted=true"]
