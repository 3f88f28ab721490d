"""Heart rate time series endpoints.

https://dev.fitbit.com/build/reference/web-api/heartrate-timeseries/
"""

from typing import Optional

from fitbit_api.dates import FlexibleDate, day_and_time
from fitbit_api.responses import ApiResult
from fitbit_api.services.base import BaseService

DETAIL_LEVELS = ("1sec", "1min", "5min", "15min")


class HeartRateService(BaseService):

    def get_time_series(
        self,
        date: Optional[FlexibleDate] = None,
        period: str = "1d",
        start_date: Optional[FlexibleDate] = None,
        end_date: Optional[FlexibleDate] = None,
    ) -> ApiResult:
        """Daily heart rate summaries for a date and period or a date range."""
        segment = self.date_or_range(date, period, start_date, end_date)
        return self.client.get(self.client.url(1, f"activities/heart/date/{segment}.json"))

    def get_intraday(
        self,
        detail_level: str,
        date: Optional[FlexibleDate] = None,
        start_time: Optional[FlexibleDate] = None,
        end_time: Optional[FlexibleDate] = None,
    ) -> ApiResult:
        """Intraday heart rate for a whole day or a time window.

        The window can't exceed 24 hours, Fitbit rejects longer ones.
        """
        if detail_level not in DETAIL_LEVELS:
            raise ValueError(f"Invalid detail level: {detail_level}")

        if date is not None:
            path = f"activities/heart/date/{day_and_time(date)[0]}/1d/{detail_level}.json"
        elif start_time is not None and end_time is not None:
            start_day, start_clock = day_and_time(start_time)
            end_day, end_clock = day_and_time(end_time)
            path = (
                f"activities/heart/date/{start_day}/{end_day}/{detail_level}"
                f"/time/{start_clock}/{end_clock}.json"
            )
        else:
            raise ValueError("Pass a date, or both start_time and end_time")

        return self.client.get(self.client.url(1, path))
