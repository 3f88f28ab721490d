"""Body weight and fat endpoints."""

from typing import Optional, Union

from fitbit_api.dates import FlexibleDate
from fitbit_api.responses import ApiResult
from fitbit_api.services.base import BaseService

BODY_LOGS = ("weight", "fat")


def _check_log(data: str) -> None:
    if data not in BODY_LOGS:
        raise ValueError(f"Unsupported body log: {data}")


class BodyService(BaseService):

    def get_logs(
        self,
        data: str,
        date: Optional[FlexibleDate] = None,
        period: str = "1d",
        start_date: Optional[FlexibleDate] = None,
        end_date: Optional[FlexibleDate] = None,
    ) -> ApiResult:
        """Weight or fat log entries for a date and period or a date range."""
        _check_log(data)
        segment = self.date_or_range(date, period, start_date, end_date)
        return self.client.get(self.client.url(1, f"body/log/{data}/date/{segment}.json"))

    def delete_log(self, data: str, log_id: Union[int, str]) -> ApiResult:
        _check_log(data)
        return self.client.delete(self.client.url(1, f"body/log/{data}/{log_id}.json"))
