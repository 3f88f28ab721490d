"""OAuth2 token refresh for Fitbit."""

import logging
import time
from typing import Any, Callable, Dict, Optional

import requests

from fitbit_api.config import Config

logger = logging.getLogger(__name__)


class TokenRefresher:
    """Refresh-token grant usable as ``FitbitClient(get_token=...)``.

    Fitbit rotates the refresh token on every refresh, the new one is kept
    on the instance. Pass ``on_refresh`` to persist the token document.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        refresh_token: Optional[str],
        token_url: Optional[str] = None,
        on_refresh: Optional[Callable[[Dict[str, Any]], None]] = None,
        session: Optional[requests.Session] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.refresh_token = refresh_token
        self.token_url = token_url or Config.TOKEN_URL
        self.on_refresh = on_refresh
        self.session = session or requests.Session()
        self.expires_at: Optional[int] = None

    @classmethod
    def from_config(cls, on_refresh: Optional[Callable[[Dict[str, Any]], None]] = None):
        """Build a refresher from ``FITBIT_*`` settings, or None if incomplete."""
        if not (Config.CLIENT_ID and Config.CLIENT_SECRET and Config.REFRESH_TOKEN):
            return None
        return cls(Config.CLIENT_ID, Config.CLIENT_SECRET, Config.REFRESH_TOKEN, on_refresh=on_refresh)

    def __call__(self) -> str:
        if not self.refresh_token:
            raise ValueError("No refresh token available")

        response = self.session.post(
            self.token_url,
            auth=(self.client_id, self.client_secret),
            data={"grant_type": "refresh_token", "refresh_token": self.refresh_token},
            timeout=Config.REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        tokens = response.json()

        self.refresh_token = tokens.get("refresh_token", self.refresh_token)
        self.expires_at = int(time.time()) + tokens.get("expires_in", 3600)
        logger.info(f"Refreshed access token, expires in {tokens.get('expires_in', 3600)}s")

        if self.on_refresh:
            self.on_refresh(tokens)

        return tokens["access_token"]
