from unittest.mock import MagicMock

import requests
import pytest

from primecloud import api_client
from primecloud.api_client import NumbersServiceClient, ApiError
from primecloud.discovery import ServiceRegistry


class DummyResponse:
    def __init__(self, status_code: int, ok: bool, text: str = "", payload=None) -> None:
        self.status_code = status_code
        self.ok = ok
        self.text = text
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


def _registry() -> ServiceRegistry:
    registry = ServiceRegistry(instance_id="caller")
    registry.register("numbers-service", "http://numbers.local:8081")
    return registry


def test_calculate_prime_numbers_posts_range(monkeypatch):
    calls = []

    def _fake_post(url, **kwargs):
        calls.append((url, kwargs))
        return DummyResponse(
            200, True, payload={"primeNumbers": [2, 3, 5, 7], "instanceId": "node-1"}
        )

    monkeypatch.setattr(requests, "post", _fake_post)

    response = NumbersServiceClient(_registry(), timeout=5.0).calculate_prime_numbers(0, 10)

    assert response.primes == [2, 3, 5, 7]
    assert response.instance_id == "node-1"
    url, kwargs = calls[0]
    assert url == "http://numbers.local:8081/primenumbers"
    assert kwargs["json"] == {"from": 0, "to": 10}
    assert kwargs["timeout"] == 5.0


def test_calculate_prime_numbers_accepts_primes_key(monkeypatch):
    def _fake_post(*_args, **_kwargs):
        return DummyResponse(200, True, payload={"primes": [], "instanceId": "node-2"})

    monkeypatch.setattr(requests, "post", _fake_post)

    response = NumbersServiceClient(_registry()).calculate_prime_numbers(10, 0)
    assert response.primes == []
    assert response.instance_id == "node-2"


@pytest.mark.parametrize("method", ["GET", "PATCH"])
def test_make_api_call_only_posts(monkeypatch, method):
    def _unexpected(*_args, **_kwargs):
        raise AssertionError("no request should be sent")

    monkeypatch.setattr(requests, "post", _unexpected)
    monkeypatch.setattr(requests, "get", _unexpected)

    with pytest.raises(ValueError):
        NumbersServiceClient(_registry()).make_api_call("primenumbers", method=method)


def test_raises_api_error_on_http_failure(monkeypatch):
    def _fake_post(*_args, **_kwargs):
        return DummyResponse(status_code=500, ok=False, text="boom")

    monkeypatch.setattr(requests, "post", _fake_post)

    with pytest.raises(ApiError) as exc_info:
        NumbersServiceClient(_registry()).calculate_prime_numbers(0, 100)
    assert exc_info.value.status_code == 500


def test_raises_api_error_on_request_exception(monkeypatch):
    def _fake_post(*_args, **_kwargs):
        raise requests.ConnectionError("network down")

    monkeypatch.setattr(requests, "post", _fake_post)

    with pytest.raises(ApiError) as exc_info:
        NumbersServiceClient(_registry()).calculate_prime_numbers(0, 100)
    assert exc_info.value.status_code is None


def test_raises_api_error_on_malformed_body(monkeypatch):
    def _fake_post(*_args, **_kwargs):
        return DummyResponse(200, True, payload={"instanceId": "node-1"})

    monkeypatch.setattr(requests, "post", _fake_post)

    with pytest.raises(ApiError):
        NumbersServiceClient(_registry()).calculate_prime_numbers(0, 100)


def test_raises_api_error_on_non_json_body(monkeypatch):
    def _fake_post(*_args, **_kwargs):
        return DummyResponse(200, True, text="<html>")

    monkeypatch.setattr(requests, "post", _fake_post)

    with pytest.raises(ApiError):
        NumbersServiceClient(_registry()).calculate_prime_numbers(0, 100)


def test_api_error_carries_status_code():
    assert ApiError("boom").status_code is None
    assert ApiError("boom", status_code=502).status_code == 502


@pytest.mark.parametrize(
    "base, path",
    [
        ("http://numbers.local:8081", "primenumbers"),
        ("http://numbers.local:8081/", "/primenumbers"),
    ],
)
def test_build_url_joins_without_double_slash(base, path):
    registry = ServiceRegistry(instance_id="caller")
    registry.register("numbers-service", base)
    client = NumbersServiceClient(registry)
    assert client._build_url(path) == "http://numbers.local:8081/primenumbers"


def test_timeout_defaults_to_configured_value(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT", "7.5")
    assert NumbersServiceClient(_registry()).timeout == 7.5


def test_call_span_records_http_attributes(monkeypatch):
    span = MagicMock()
    tracer = MagicMock()
    tracer.start_as_current_span.return_value.__enter__.return_value = span
    monkeypatch.setattr(api_client, "tracer", tracer)

    def _fake_post(*_args, **_kwargs):
        return DummyResponse(200, True, payload={"primeNumbers": [2], "instanceId": "n"})

    monkeypatch.setattr(requests, "post", _fake_post)

    NumbersServiceClient(_registry()).calculate_prime_numbers(2, 2)

    span.set_attribute.assert_any_call("http.url", "http://numbers.local:8081/primenumbers")
    span.set_attribute.assert_any_call("http.method", "POST")
    span.set_attribute.assert_any_call("http.status_code", 200)
    span.set_attribute.assert_any_call("call.completed", True)
