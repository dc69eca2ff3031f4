import importlib

from primecloud.config import NUMBERS_SERVICE_URL, from_env, validate


def test_from_env_returns_valid_config():
    config = from_env()
    assert "NUMBERS_SERVICE_URL" in config
    assert "INSTANCE_ID" in config
    assert config["NUMBERS_SERVICE_URL"].startswith("http")


def test_numbers_service_url_defined():
    assert NUMBERS_SERVICE_URL is not None
    assert NUMBERS_SERVICE_URL.startswith("http")


def test_from_env_default_range(monkeypatch):
    monkeypatch.delenv("RANGE_FROM", raising=False)
    monkeypatch.delenv("RANGE_TO", raising=False)
    config = from_env()
    assert config["RANGE"] == {"range_from": 0, "range_to": 100}


def test_from_env_reads_latest_environment_values(monkeypatch):
    monkeypatch.setenv("NUMBERS_SERVICE_URL", "http://example.local:9000")
    monkeypatch.delenv("OPENAPI_SPEC_URL", raising=False)
    config = from_env()
    assert config["NUMBERS_SERVICE_URL"] == "http://example.local:9000"
    assert config["OPENAPI_SPEC_URL"] == "http://example.local:9000/openapi.json"


def test_validate_returns_true_for_defaults(monkeypatch):
    monkeypatch.delenv("NUMBERS_SERVICE_URL", raising=False)
    monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)
    assert validate() is True


def test_validate_rejects_non_http_url(monkeypatch):
    monkeypatch.setenv("NUMBERS_SERVICE_URL", "numbers-service:8081")
    assert validate() is False


def test_validate_rejects_non_positive_timeout(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT", "0")
    assert validate() is False


def test_module_range_reflects_environment(monkeypatch):
    from primecloud import config

    monkeypatch.setenv("RANGE_FROM", "5")
    monkeypatch.setenv("RANGE_TO", "50")
    try:
        importlib.reload(config)
        assert config.RANGE == {"range_from": 5, "range_to": 50}
    finally:
        monkeypatch.delenv("RANGE_FROM")
        monkeypatch.delenv("RANGE_TO")
        importlib.reload(config)


def test_from_env_exposes_request_timeout(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT", "12.5")
    assert from_env()["REQUEST_TIMEOUT"] == 12.5
