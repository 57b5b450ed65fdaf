import logging

import requests

from tests.utils import FakeResponse

SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_API_BASE = "https://api.spotify.com/v1"


def install_post(monkeypatch, response):
    """Fake POST returning `response`; records (url, json, headers)."""
    calls = []

    def fake_post(url, headers=None, json=None, timeout=15, **kwargs):
        calls.append((url, json, headers))
        if url == SPOTIFY_TOKEN_URL:
            raise ValueError("Token endpoint should not be called")
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(requests, "post", fake_post)
    return calls


def test_create_playlist_returns_created_playlist(monkeypatch, client):
    created = {"id": "pl1", "name": "My List", "tracks": {"items": []}}
    calls = install_post(monkeypatch, FakeResponse(201, json_data=created))
    client.oauth.access_token = "held"

    playlist = client.create_playlist("u1", "My List", "desc", True)

    assert playlist == created
    assert len(calls) == 1
    url, body, headers = calls[0]
    assert url == f"{SPOTIFY_API_BASE}/users/u1/playlists"
    assert body == {"name": "My List", "description": "desc", "public": True}
    assert headers == {"Authorization": "Bearer held"}


def test_create_playlist_does_not_authenticate(monkeypatch, client):
    calls = install_post(monkeypatch, FakeResponse(201, json_data={"id": "pl1"}))

    client.create_playlist("u1", "Private", "", False)

    assert [url for url, _, _ in calls] == [f"{SPOTIFY_API_BASE}/users/u1/playlists"]
    assert calls[0][2] == {"Authorization": "Bearer None"}
    assert calls[0][1]["public"] is False


def test_create_playlist_failure_returns_none(monkeypatch, client, caplog):
    install_post(monkeypatch, FakeResponse(403, json_data={"error": {"status": 403}}))

    with caplog.at_level(logging.ERROR):
        assert client.create_playlist("u1", "My List", "desc", True) is None
    assert "Failed to create playlist" in caplog.text


def test_create_playlist_network_error_returns_none(monkeypatch, client):
    install_post(monkeypatch, requests.ConnectionError("reset by peer"))

    assert client.create_playlist("u1", "My List", "desc", True) is None


def test_add_tracks_posts_uris(monkeypatch, client):
    calls = install_post(monkeypatch, FakeResponse(201, json_data={"snapshot_id": "snap1"}))
    client.oauth.access_token = "held"

    result = client.add_tracks_to_playlist("pl1", ["uri1", "uri2"])

    assert result is None
    assert len(calls) == 1
    url, body, headers = calls[0]
    assert url == f"{SPOTIFY_API_BASE}/playlists/pl1/tracks"
    assert body == {"uris": ["uri1", "uri2"]}
    assert headers == {"Authorization": "Bearer held"}


def test_add_tracks_ignores_response_body(monkeypatch, client):
    install_post(monkeypatch, FakeResponse(201, text="not json"))

    assert client.add_tracks_to_playlist("pl1", ["uri1"]) is None


def test_add_tracks_failure_is_logged(monkeypatch, client, caplog):
    install_post(monkeypatch, FakeResponse(404, json_data={"error": {"status": 404}}))

    with caplog.at_level(logging.ERROR):
        assert client.add_tracks_to_playlist("missing", ["uri1"]) is None
    assert "Failed to add tracks to playlist missing" in caplog.text
