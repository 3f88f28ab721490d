"""requests based transport."""

import logging
from typing import Any, Dict, Optional

import requests

from fitbit_api.clients.base import BaseClient
from fitbit_api.config import Config

logger = logging.getLogger(__name__)


class HttpClient(BaseClient):
    """Transport backed by a ``requests.Session``.

    Relative paths are joined to ``base_url``; absolute URLs (pagination
    cursors) are used unchanged. The session's headers are the default
    headers, so a token installed with :meth:`set_default_header` applies to
    every request issued afterwards, including ones from other callers
    sharing this instance.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        super().__init__()
        self.base_url = (base_url or Config.API_BASE_URL).rstrip("/")
        self.timeout = timeout or Config.REQUEST_TIMEOUT
        self.session = requests.Session()
        self.default_headers = self.session.headers

    def build_url(self, url: str) -> str:
        if url.startswith(("http://", "https://")):
            return url
        return f"{self.base_url}/{url.lstrip('/')}"

    def _request(
        self,
        method: str,
        url: str,
        data: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        full_url = self.build_url(url)
        logger.debug(f"{method} {full_url}")
        return self.session.request(
            method,
            full_url,
            data=data,
            headers=headers,
            timeout=self.timeout,
        )

    def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        return self._request("GET", url, headers=headers)

    def post(
        self, url: str, data: Optional[Any] = None, headers: Optional[Dict[str, str]] = None
    ) -> requests.Response:
        return self._request("POST", url, data=data, headers=headers)

    def delete(self, url: str, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        return self._request("DELETE", url, headers=headers)
