from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypedDict, TypeVar

T = TypeVar("T")


class BaseClient(ABC):
    """
    Base class for API clients.
    """

    def __init__(self, client_id: str, client_secret: str):
        self.client_id = client_id
        self.client_secret = client_secret

    @abstractmethod
    def authenticate(self) -> None:
        """
        Fetch a fresh access token for the client.
        """
        raise NotImplementedError("Subclasses should implement this method.")

    @abstractmethod
    def make_request(self, url: str, params: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        """
        Perform an authenticated GET and return the decoded body, or None on failure.
        """
        raise NotImplementedError("Subclasses should implement this method.")


@dataclass(slots=True, frozen=True)
class CallResult(Generic[T]):
    """Outcome of a single HTTP call: either a decoded value or the error that stopped it."""

    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ----------------------------------------------------------------------
# Response shapes. Values are the raw JSON dicts returned by Spotify.
# ----------------------------------------------------------------------


class Followers(TypedDict):
    total: int


class ArtistRef(TypedDict):
    name: str


class Image(TypedDict):
    url: str


class Track(TypedDict):
    id: str
    name: str
    artists: List[ArtistRef]


class PlaylistItem(TypedDict):
    track: Track


class PagingObject(TypedDict, Generic[T]):
    items: List[T]


class Playlist(TypedDict):
    id: str
    name: str
    tracks: PagingObject[PlaylistItem]


class Album(TypedDict):
    id: str
    name: str
    artists: List[ArtistRef]
    tracks: PagingObject[Track]


class Artist(TypedDict):
    id: str
    name: str
    genres: List[str]
    popularity: int
    followers: Followers


class UserProfile(TypedDict):
    id: str
    display_name: str
    followers: Followers
    images: List[Image]


AudioFeatures = Dict[str, Any]
