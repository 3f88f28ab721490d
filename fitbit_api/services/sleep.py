"""Sleep endpoints.

https://dev.fitbit.com/build/reference/web-api/sleep/
"""

from typing import Optional, Union

from fitbit_api.config import Config
from fitbit_api.dates import FlexibleDate, day_and_time
from fitbit_api.models import SleepLog
from fitbit_api.pagination import PageSequence
from fitbit_api.responses import ApiResult
from fitbit_api.services.base import BaseService
from fitbit_api.utils import dict_to_url_params


class SleepService(BaseService):
    """Sleep logs and sleep goal."""

    def get_log_list(
        self,
        before_date: Optional[FlexibleDate] = None,
        after_date: Optional[FlexibleDate] = None,
        sort: Optional[str] = None,
        limit: int = Config.MAX_PAGE_LIMIT,
        offset: int = 0,
    ) -> PageSequence[SleepLog]:
        """Sleep logs before or after a date, one page per pull.

        https://dev.fitbit.com/build/reference/web-api/sleep/get-sleep-log-list/
        """
        params = self.log_list_params(before_date, after_date, sort, limit, offset)
        url = self.client.url(1.2, f"sleep/list.json{dict_to_url_params(params)}")
        return self.client.page_generator(url, "sleep")

    def get_by_date(self, date: FlexibleDate) -> ApiResult:
        return self.client.get(self.client.url(1.2, f"sleep/date/{day_and_time(date)[0]}.json"))

    def get_by_date_range(self, start_date: FlexibleDate, end_date: FlexibleDate) -> ApiResult:
        start = day_and_time(start_date)[0]
        end = day_and_time(end_date)[0]
        return self.client.get(self.client.url(1.2, f"sleep/date/{start}/{end}.json"))

    def create_log(self, time: FlexibleDate, duration: int) -> ApiResult:
        """Log a sleep starting at ``time`` lasting ``duration`` milliseconds."""
        date, start_time = day_and_time(time)
        params = dict_to_url_params({"duration": duration, "date": date, "startTime": start_time})
        return self.client.post(self.client.url(1.2, f"sleep.json{params}"))

    def delete_log(self, log_id: Union[int, str]) -> ApiResult:
        return self.client.delete(self.client.url(1.2, f"sleep/{log_id}.json"))

    def get_goal(self) -> ApiResult:
        return self.client.get(self.client.url(1.2, "sleep/goal.json"))

    def create_goal(self, min_duration: int) -> ApiResult:
        """Create or update the sleep goal, in minutes."""
        params = dict_to_url_params({"minDuration": min_duration})
        return self.client.post(self.client.url(1.2, f"sleep/goal.json{params}"))
