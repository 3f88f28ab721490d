"""User profile endpoints."""

from fitbit_api.responses import ApiResult
from fitbit_api.services.base import BaseService


class UserService(BaseService):

    def get_profile(self) -> ApiResult:
        return self.client.get(self.client.url(1, "profile.json"))

    def get_badges(self) -> ApiResult:
        return self.client.get(self.client.url(1, "badges.json"))
