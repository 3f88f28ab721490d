"""Device endpoints."""

from typing import List

from fitbit_api.models import Device
from fitbit_api.responses import ApiResult
from fitbit_api.services.base import BaseService


class DevicesService(BaseService):

    def get_list(self) -> ApiResult[List[Device]]:
        """Devices paired to the user's account."""
        return self.client.get(self.client.url(1, "devices.json"))
