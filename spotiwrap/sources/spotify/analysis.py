"""Audio-feature lookups for single tracks and whole playlists."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from spotiwrap.logger import get_logger
from spotiwrap.sources.base import AudioFeatures
from spotiwrap.sources.spotify.client import SPOTIFY_API_BASE, SpotifyClient

logger = get_logger(__name__)

MAX_WORKERS = 8  # threads used to fetch features in parallel


class PlaylistFeatureAnalyzer:
    """Fetches audio features through a (possibly shared) SpotifyClient."""

    def __init__(self, client: SpotifyClient, *, max_workers: int = MAX_WORKERS) -> None:
        self.client = client
        self.max_workers = max_workers

    def get_track_features(self, track_id: str) -> Optional[AudioFeatures]:
        """Get the audio features of one track, or None if they could not be fetched."""
        return self.client.make_request(f"{SPOTIFY_API_BASE}/audio-features/{track_id}")

    def _features_or_none(self, track_id: Optional[str]) -> Optional[AudioFeatures]:
        # Removed and local tracks come back without an id.
        if not track_id:
            return None
        return self.get_track_features(track_id)

    def analyze_playlist(self, playlist_id: str) -> Optional[List[Optional[AudioFeatures]]]:
        """
        Get audio features for every track of a playlist.

        Feature requests run concurrently; the result keeps the playlist's
        track order. A track whose features could not be fetched leaves None
        in its slot.

        Returns:
            One entry per playlist item, or None if the playlist itself could
            not be fetched
        """
        playlist = self.client.get_playlist(playlist_id)
        if playlist is None:
            return None

        items = (playlist.get("tracks") or {}).get("items") or []
        track_ids = [((item or {}).get("track") or {}).get("id") for item in items]
        if not track_ids:
            return []

        logger.info(f"Fetching audio features for {len(track_ids)} tracks of playlist {playlist_id}")
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(track_ids))) as executor:
            return list(executor.map(self._features_or_none, track_ids))
