import pytest
import requests

from spotiwrap.sources.spotify import SpotifyClient
from tests.utils import FakeResponse

SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"


@pytest.fixture
def token_payload():
    return {
        "access_token": "tok",
        "token_type": "Bearer",
        "expires_in": 3600,
    }


@pytest.fixture
def token_requests(monkeypatch, token_payload):
    """Fake token endpoint; returns the list of (data, headers) it was called with."""
    calls = []

    def fake_post(url, data=None, headers=None, timeout=15, **kwargs):
        if url != SPOTIFY_TOKEN_URL:
            raise ValueError(f"Unexpected POST: {url}")
        calls.append((data, headers))
        return FakeResponse(200, json_data=token_payload)

    monkeypatch.setattr(requests, "post", fake_post)
    return calls


@pytest.fixture
def client():
    return SpotifyClient("id1", "secret1")
