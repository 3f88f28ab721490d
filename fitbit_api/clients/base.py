"""Base transport interface for Fitbit API clients."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests


class BaseClient(ABC):
    """Abstract HTTP transport.

    Implementations keep a set of default headers (the bearer token lives
    there) that is sent with every request unless overridden per call.
    """

    def __init__(self):
        self.default_headers: Dict[str, str] = {}

    def set_default_header(self, name: str, value: str) -> None:
        """Set a header sent with every later request."""
        self.default_headers[name] = value

    @abstractmethod
    def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """Issue a GET request."""
        pass

    @abstractmethod
    def post(
        self, url: str, data: Optional[Any] = None, headers: Optional[Dict[str, str]] = None
    ) -> requests.Response:
        """Issue a POST request."""
        pass

    @abstractmethod
    def delete(self, url: str, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """Issue a DELETE request."""
        pass
