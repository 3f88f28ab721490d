"""Subscription endpoints.

Fitbit notifies a registered subscriber endpoint when a user has new data,
so nothing has to poll. The subscriber itself is configured at
https://dev.fitbit.com/apps.

https://dev.fitbit.com/build/reference/web-api/subscription/
"""

from typing import Dict, List, Optional, Union

from fitbit_api.models import Subscription
from fitbit_api.responses import ApiResult
from fitbit_api.services.base import BaseService

COLLECTIONS = ("all", "activities", "body", "foods", "sleep", "userRevokedAccess")

Identifier = Union[int, str]


class SubscriptionService(BaseService):
    """Create, list and delete subscriptions.

    ``collection="all"`` subscribes to every collection. Combining it with a
    specific collection produces duplicate notifications.
    """

    def path(self, collection: str, subscription_id: Optional[Identifier] = None) -> str:
        if collection not in COLLECTIONS:
            raise ValueError(f"Unsupported collection: {collection}")

        prefix = "" if collection == "all" else f"{collection}/"
        suffix = f"/{subscription_id}" if subscription_id is not None else ""
        return self.client.url(1, f"{prefix}apiSubscriptions{suffix}.json")

    @staticmethod
    def _headers(subscriber_id: Optional[Identifier]) -> Dict[str, str]:
        return {"X-Fitbit-Subscriber-Id": str(subscriber_id)} if subscriber_id is not None else {}

    def create(
        self,
        collection: str,
        subscription_id: Optional[Identifier] = None,
        subscriber_id: Optional[Identifier] = None,
    ) -> ApiResult[Dict[str, List[Subscription]]]:
        return self.client.post(
            self.path(collection, subscription_id), headers=self._headers(subscriber_id)
        )

    def get_list(
        self, collection: str, subscriber_id: Optional[Identifier] = None
    ) -> ApiResult[Dict[str, List[Subscription]]]:
        return self.client.get(self.path(collection), headers=self._headers(subscriber_id))

    def delete(
        self,
        collection: str,
        subscription_id: Identifier,
        subscriber_id: Optional[Identifier] = None,
    ) -> ApiResult:
        return self.client.delete(
            self.path(collection, subscription_id), headers=self._headers(subscriber_id)
        )
