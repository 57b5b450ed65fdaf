"""OAuth2 client-credentials helper for music service clients."""

from __future__ import annotations

import base64
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

DEFAULT_TIMEOUT = 15


class OAuth2Error(RuntimeError):
    """Raised when OAuth2 authentication fails."""


class OAuth2Client(ABC):
    """
    Abstract base class for the OAuth2 client-credentials grant.

    Exchanges the application's id/secret for an access token. No end user is
    involved, no refresh token is issued and nothing is cached: every call to
    request_token() hits the token endpoint again.
    """

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize OAuth2 client.

        Args:
            client_id: OAuth2 client ID
            client_secret: OAuth2 client secret
            timeout: Seconds to wait for the token endpoint
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.timeout = timeout

        self.access_token: Optional[str] = None

    # ------------------------------------------------------------------
    # Abstract methods - must be implemented by subclasses
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def token_url(self) -> str:
        """Return the OAuth2 token endpoint URL."""

    @property
    @abstractmethod
    def service_name(self) -> str:
        """Return the name of the service (e.g., 'Spotify')."""

    # ------------------------------------------------------------------
    # Client-credentials grant
    # ------------------------------------------------------------------

    def basic_auth_header(self) -> str:
        """Return the `Basic` authorization value built from the client id and secret."""
        raw = f"{self.client_id}:{self.client_secret}".encode()
        return f"Basic {base64.b64encode(raw).decode('ascii')}"

    def request_token(self) -> str:
        """
        Request a new access token and store it on the client.

        Returns:
            The new access token

        Raises:
            OAuth2Error: If the request fails; the previous token is left untouched
        """
        headers = {"Authorization": self.basic_auth_header()}
        data = {"grant_type": "client_credentials"}

        try:
            resp = requests.post(self.token_url, data=data, headers=headers, timeout=self.timeout)
            if not 200 <= resp.status_code < 300:
                raise OAuth2Error(f"{self.service_name} token request failed ({resp.status_code}): {resp.text}")
            payload: Dict[str, Any] = resp.json()
        except requests.RequestException as e:
            raise OAuth2Error(f"Failed to request {self.service_name} token: {e}") from e

        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not token:
            raise OAuth2Error(f"{self.service_name} token response did not contain an access_token")

        self.access_token = token
        return token
