"""Activity endpoints.

https://dev.fitbit.com/build/reference/web-api/activity/
"""

from typing import Optional

from fitbit_api.config import Config
from fitbit_api.dates import FlexibleDate, day_and_time
from fitbit_api.models import ActivityLog
from fitbit_api.pagination import PageSequence
from fitbit_api.responses import ApiResult
from fitbit_api.services.base import BaseService
from fitbit_api.utils import dict_to_url_params


class ActivityService(BaseService):

    def get_log_list(
        self,
        before_date: Optional[FlexibleDate] = None,
        after_date: Optional[FlexibleDate] = None,
        sort: Optional[str] = None,
        limit: int = Config.MAX_PAGE_LIMIT,
        offset: int = 0,
    ) -> PageSequence[ActivityLog]:
        """Activity logs before or after a date, one page per pull."""
        params = self.log_list_params(before_date, after_date, sort, limit, offset)
        url = self.client.url(1, f"activities/list.json{dict_to_url_params(params)}")
        return self.client.page_generator(url, "activities")

    def get_daily_summary(self, date: FlexibleDate = "today") -> ApiResult:
        return self.client.get(self.client.url(1, f"activities/date/{day_and_time(date)[0]}.json"))

    def get_lifetime_stats(self) -> ApiResult:
        return self.client.get(self.client.url(1, "activities.json"))

    def get_time_series(
        self,
        resource: str,
        date: Optional[FlexibleDate] = None,
        period: str = "1d",
        start_date: Optional[FlexibleDate] = None,
        end_date: Optional[FlexibleDate] = None,
    ) -> ApiResult:
        """Daily values of ``resource`` (``steps``, ``calories``, ...).

        Pass ``date`` and ``period`` or ``start_date`` and ``end_date``.
        """
        segment = self.date_or_range(date, period, start_date, end_date)
        return self.client.get(self.client.url(1, f"activities/{resource}/date/{segment}.json"))
