"""Fitbit Web API client.

The client owns the bearer token and the response classifier; the endpoint
groups (``client.sleep``, ``client.activity``, ...) build URLs and hand them
to :meth:`FitbitClient.get` and friends, or to
:meth:`FitbitClient.page_generator` for list endpoints.

One instance holds one token. A refresh triggered by any call replaces the
token for every later call on the same instance, concurrent callers
included, so use separate instances for separate users.
"""

import logging
from typing import Any, Callable, Dict, Optional, Union

from fitbit_api.clients.base import BaseClient
from fitbit_api.clients.session import HttpClient
from fitbit_api.pagination import PageSequence
from fitbit_api.responses import ApiResult, ResponseClassifier
from fitbit_api.services.activity import ActivityService
from fitbit_api.services.body import BodyService
from fitbit_api.services.devices import DevicesService
from fitbit_api.services.heart_rate import HeartRateService
from fitbit_api.services.sleep import SleepService
from fitbit_api.services.subscription import SubscriptionService
from fitbit_api.services.user import UserService

logger = logging.getLogger(__name__)


class FitbitClient:
    """Client for the Fitbit Web API.

    Args:
        access_token: OAuth2 bearer token.
        user_id: Fitbit user id, ``"-"`` for the token's owner.
        get_token: Optional callable returning a fresh access token. When
            set, calls rejected with ``expired_token`` or ``invalid_token``
            refresh the token and retry.
        http: Transport, defaults to :class:`HttpClient`.
    """

    def __init__(
        self,
        access_token: str,
        user_id: str = "-",
        get_token: Optional[Callable[[], str]] = None,
        http: Optional[BaseClient] = None,
    ):
        self.http = http or HttpClient()
        self.user_id = user_id
        self.access_token = None
        self.set_access_token(access_token)
        self.classifier = ResponseClassifier(self.set_access_token, get_token)

        self.activity = ActivityService(self)
        self.body = BodyService(self)
        self.devices = DevicesService(self)
        self.heart_rate = HeartRateService(self)
        self.sleep = SleepService(self)
        self.subscription = SubscriptionService(self)
        self.user = UserService(self)

    def set_access_token(self, token: str) -> None:
        """Replace the bearer token used by every later request."""
        self.access_token = token
        self.http.set_default_header("Authorization", f"Bearer {token}")

    def get_api_info(self) -> Dict[str, str]:
        return {"access_token": self.access_token, "user_id": self.user_id}

    def url(self, version: Union[int, float], namespace: str, no_user: bool = False) -> str:
        """Build an API path such as ``1.2/user/-/sleep/goal.json``."""
        if no_user:
            return f"{version}/{namespace}"
        return f"{version}/user/{self.user_id}/{namespace}"

    def handle_data(self, perform_call: Callable[[], Any]) -> ApiResult:
        return self.classifier.classify(perform_call)

    def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> ApiResult:
        return self.handle_data(lambda: self.http.get(url, headers=headers))

    def post(
        self, url: str, data: Optional[Any] = None, headers: Optional[Dict[str, str]] = None
    ) -> ApiResult:
        return self.handle_data(lambda: self.http.post(url, data=data, headers=headers))

    def delete(self, url: str, headers: Optional[Dict[str, str]] = None) -> ApiResult:
        return self.handle_data(lambda: self.http.delete(url, headers=headers))

    def page_generator(self, url: str, data_key: str) -> PageSequence:
        """Walk a paginated list endpoint, see :class:`PageSequence`."""
        return PageSequence(self.get, url, data_key)
