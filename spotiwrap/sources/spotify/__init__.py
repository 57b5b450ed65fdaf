"""Spotify API client."""

from .analysis import PlaylistFeatureAnalyzer
from .client import (
    SpotifyAuthError,
    SpotifyClient,
)

__all__ = [
    "PlaylistFeatureAnalyzer",
    "SpotifyAuthError",
    "SpotifyClient",
]
