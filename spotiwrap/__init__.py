"""Thin client over the Spotify Web API."""

from spotiwrap.sources import (
    PlaylistFeatureAnalyzer,
    SpotifyAuthError,
    SpotifyClient,
)

__all__ = [
    "PlaylistFeatureAnalyzer",
    "SpotifyAuthError",
    "SpotifyClient",
]
