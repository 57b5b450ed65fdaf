"""Spotify API client implementation."""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import requests
from dotenv import load_dotenv

from spotiwrap.logger import get_logger
from spotiwrap.sources.base import (
    Album,
    Artist,
    BaseClient,
    CallResult,
    Playlist,
    Track,
    UserProfile,
)
from spotiwrap.sources.oauth2 import DEFAULT_TIMEOUT, OAuth2Client, OAuth2Error


logger = get_logger(__name__)

SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_API_BASE = "https://api.spotify.com/v1"


class SpotifyAuthError(OAuth2Error):
    """Raised when Spotify authentication fails."""


class SpotifyOAuth2Client(OAuth2Client):
    """Client-credentials token fetcher for Spotify."""

    @property
    def token_url(self) -> str:
        return SPOTIFY_TOKEN_URL

    @property
    def service_name(self) -> str:
        return "Spotify"


class SpotifyClient(BaseClient):
    """Spotify Web API client authenticated with the client-credentials grant.

    Read methods re-authenticate before every request and never raise on
    network or HTTP failures: the failure is logged and the method returns
    None.
    """

    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize Spotify client.

        Args:
            client_id: Spotify client ID
            client_secret: Spotify client secret
            timeout: Seconds to wait for any single HTTP request
        """
        if not (client_id and client_secret):
            raise SpotifyAuthError("client_id and client_secret must be set")

        super().__init__(client_id, client_secret)
        self.timeout = timeout
        self.oauth = SpotifyOAuth2Client(
            client_id=client_id,
            client_secret=client_secret,
            timeout=timeout,
        )

    @classmethod
    def from_env(
        cls,
        *,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> SpotifyClient:
        """Build a client from SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET (a .env file is loaded first)."""
        load_dotenv()

        return cls(
            client_id or os.getenv("SPOTIFY_CLIENT_ID"),
            client_secret or os.getenv("SPOTIFY_CLIENT_SECRET"),
            timeout=timeout,
        )

    @property
    def access_token(self) -> Optional[str]:
        return self.oauth.access_token

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    def _headers(self) -> Dict[str, str]:
        """Get headers for authenticated requests."""
        return {"Authorization": f"Bearer {self.access_token}"}

    def _get(self, url: str, params: Optional[Dict[str, Any]] = None) -> CallResult[Any]:
        """GET request with the current token."""
        try:
            resp = requests.get(url, headers=self._headers(), params=params, timeout=self.timeout)
            resp.raise_for_status()
            return CallResult(value=resp.json())
        except requests.RequestException as e:
            return CallResult(error=e)

    def _post(self, url: str, payload: Dict[str, Any], *, decode: bool = True) -> CallResult[Any]:
        """POST a JSON body with the current token."""
        try:
            resp = requests.post(url, headers=self._headers(), json=payload, timeout=self.timeout)
            resp.raise_for_status()
            return CallResult(value=resp.json() if decode and resp.text else None)
        except requests.RequestException as e:
            return CallResult(error=e)

    @staticmethod
    def _unwrap(data: Any, *path: str) -> Optional[Any]:
        """Walk one envelope down `path`; any missing level yields None."""
        for key in path:
            if not isinstance(data, dict):
                return None
            data = data.get(key)
        return data

    # ------------------------------------------------------------------
    # Public API (BaseClient implementation)
    # ------------------------------------------------------------------

    def authenticate(self) -> None:
        """Fetch a new access token; on failure log and keep the previous one."""
        try:
            self.oauth.request_token()
            logger.debug("Fetched new Spotify access token")
        except OAuth2Error as e:
            logger.error(f"Failed to authenticate with Spotify API: {e}")

    def make_request(self, url: str, params: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        """
        Authenticated GET against any Spotify endpoint.

        Always fetches a fresh token first, even if one is already held.

        Returns:
            The decoded JSON body, or None if the request failed
        """
        self.authenticate()

        result = self._get(url, params=params)
        if not result.ok:
            logger.error(f"Failed to fetch from Spotify API: {url} ({result.error})")
            return None
        return result.value

    def get_playlist(self, playlist_id: str) -> Optional[Playlist]:
        """Get a playlist by its ID."""
        return self.make_request(f"{SPOTIFY_API_BASE}/playlists/{playlist_id}")

    def search_tracks(self, query: str) -> Optional[List[Track]]:
        """Search the catalog for tracks matching `query`."""
        data = self.make_request(f"{SPOTIFY_API_BASE}/search", {"q": query, "type": "track"})
        return self._unwrap(data, "tracks", "items")

    def get_album(self, album_id: str) -> Optional[Album]:
        """Get an album by its ID."""
        return self.make_request(f"{SPOTIFY_API_BASE}/albums/{album_id}")

    def get_artist(self, artist_id: str) -> Optional[Artist]:
        """Get an artist by their ID."""
        return self.make_request(f"{SPOTIFY_API_BASE}/artists/{artist_id}")

    def get_user_profile(self, user_id: str) -> Optional[UserProfile]:
        """Get a user's public profile."""
        return self.make_request(f"{SPOTIFY_API_BASE}/users/{user_id}")

    def get_artist_top_tracks(self, artist_id: str, market: str) -> Optional[List[Track]]:
        """
        Get an artist's top tracks.

        Args:
            artist_id: The ID of the artist
            market: ISO 3166-1 alpha-2 country code the ranking is computed for
        """
        data = self.make_request(f"{SPOTIFY_API_BASE}/artists/{artist_id}/top-tracks", {"market": market})
        return self._unwrap(data, "tracks")

    def get_artist_albums(self, artist_id: str) -> Optional[List[Album]]:
        """Get the first page of albums by an artist."""
        data = self.make_request(f"{SPOTIFY_API_BASE}/artists/{artist_id}/albums")
        return self._unwrap(data, "items")

    def create_playlist(
        self,
        user_id: str,
        name: str,
        description: str,
        public: bool,
    ) -> Optional[Playlist]:
        """
        Create a playlist for a user.

        Uses the token already held by the client; it does not authenticate
        first. Call a read method or authenticate() beforehand.

        Returns:
            The created playlist, or None if the request failed
        """
        url = f"{SPOTIFY_API_BASE}/users/{user_id}/playlists"
        payload = {
            "name": name,
            "description": description,
            "public": public,
        }

        result = self._post(url, payload)
        if not result.ok:
            logger.error(f"Failed to create playlist: {result.error}")
            return None
        return result.value

    def add_tracks_to_playlist(self, playlist_id: str, track_uris: List[str]) -> None:
        """
        Add tracks (by Spotify URI) to a playlist.

        Like create_playlist(), this reuses the current token. Failures are
        logged only.
        """
        url = f"{SPOTIFY_API_BASE}/playlists/{playlist_id}/tracks"

        result = self._post(url, {"uris": track_uris}, decode=False)
        if not result.ok:
            logger.error(f"Failed to add tracks to playlist {playlist_id}: {result.error}")
