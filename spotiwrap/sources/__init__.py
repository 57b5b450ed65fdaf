"""Music service client sources."""

from spotiwrap.sources.base import BaseClient, CallResult
from spotiwrap.sources.oauth2 import OAuth2Client, OAuth2Error
from spotiwrap.sources.spotify import PlaylistFeatureAnalyzer, SpotifyAuthError, SpotifyClient

__all__ = [
    # Base classes
    "BaseClient",
    "CallResult",
    "OAuth2Client",
    "OAuth2Error",
    # Spotify
    "PlaylistFeatureAnalyzer",
    "SpotifyAuthError",
    "SpotifyClient",
]
