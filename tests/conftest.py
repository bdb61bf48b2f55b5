import sys
from pathlib import Path

import pytest

# Add project root to path
root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root))

from cineScore import settings
from cineScore.metadata.api_clients import tmdb_client, omdb_client


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self._payload = payload
        self.status_code = status_code

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    """Stands in for requests.Session; replays queued responses in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        nxt = self.responses.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "LOG_PATH", tmp_path / "debug.log")
    monkeypatch.setattr(settings, "STATE_PATH", tmp_path / "state.json")
    monkeypatch.setattr(settings, "MIN_REQUEST_DELAY", 0)
    monkeypatch.setattr(settings, "TMDB_API_KEY", "tmdb-test-key")
    monkeypatch.setattr(settings, "OMDB_API_KEY", "omdb-test-key")
    monkeypatch.setattr(tmdb_client, "_client", None)
    monkeypatch.setattr(omdb_client, "_client", None)
    return tmp_path


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def fake_response():
    return FakeResponse
