import json

import pytest
import requests

from threewords.api_client import ApiClient
from threewords.config import Settings


@pytest.fixture
def settings(monkeypatch):
    """
    Settings built from a controlled environment. API_KEY is set so that
    the lazy accessor resolves.
    """
    monkeypatch.setenv("API_KEY", "TESTKEY123")
    monkeypatch.setenv("API_GATEWAY", "http://test-w3w.example.com")
    monkeypatch.delenv("API_TIMEOUT_MS", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    return Settings.from_env()


@pytest.fixture
def make_response():
    """Factory fixture that builds real requests.Response objects."""
    def _factory(status=200, json_body=None, text=None, reason="OK",
                 url="http://test-w3w.example.com/v3/autosuggest"):
        resp = requests.Response()
        resp.status_code = status
        resp.reason = reason
        resp.url = url
        resp.encoding = "utf-8"
        if json_body is not None:
            resp._content = json.dumps(json_body).encode("utf-8")
            resp.headers["Content-Type"] = "application/json"
        else:
            resp._content = (text or "").encode("utf-8")
        return resp

    return _factory


@pytest.fixture(scope="session")
def live_settings():
    return Settings.from_env()


@pytest.fixture(scope="session")
def live_api_key(live_settings):
    """API key for the live conformance suite; skips when none is configured."""
    if not live_settings.has_api_key:
        pytest.skip("API_KEY not configured; live what3words tests skipped")

    return live_settings.api_key


@pytest.fixture(scope="session")
def live_client(live_settings):
    return live_settings.create_client()
