"""Shared helpers for endpoint services."""

from typing import TYPE_CHECKING, Any, Dict, Optional

from fitbit_api.config import Config
from fitbit_api.dates import FlexibleDate, day_and_time

if TYPE_CHECKING:
    from fitbit_api.clients.fitbit import FitbitClient


class BaseService:
    """An endpoint group bound to a :class:`FitbitClient`."""

    def __init__(self, client: "FitbitClient"):
        self.client = client

    @staticmethod
    def log_list_params(
        before_date: Optional[FlexibleDate] = None,
        after_date: Optional[FlexibleDate] = None,
        sort: Optional[str] = None,
        limit: int = Config.MAX_PAGE_LIMIT,
        offset: int = 0,
    ) -> Dict[str, Any]:
        """Query parameters of the ``list.json`` endpoints.

        Exactly one of ``before_date`` and ``after_date`` must be given.
        ``sort`` defaults to ``desc`` before a date and ``asc`` after one.
        """
        if (before_date is None) == (after_date is None):
            raise ValueError("Pass exactly one of before_date or after_date")

        if not 1 <= limit <= Config.MAX_PAGE_LIMIT:
            raise ValueError(
                f"Invalid limit: {limit}, needs to be between 1 to {Config.MAX_PAGE_LIMIT}"
            )

        params: Dict[str, Any] = {"limit": limit, "offset": offset}
        if after_date is not None:
            params["afterDate"] = day_and_time(after_date)[0]
            params["sort"] = sort or "asc"
        else:
            params["beforeDate"] = day_and_time(before_date)[0]
            params["sort"] = sort or "desc"

        return params

    @staticmethod
    def date_or_range(
        date: Optional[FlexibleDate],
        period: str,
        start_date: Optional[FlexibleDate],
        end_date: Optional[FlexibleDate],
    ) -> str:
        """Path segment ``DATE/PERIOD`` or ``START/END``."""
        if date is not None:
            if start_date is not None or end_date is not None:
                raise ValueError("Pass either date or start_date/end_date, not both")
            return f"{day_and_time(date)[0]}/{period}"

        if start_date is None or end_date is None:
            raise ValueError("Pass a date, or both start_date and end_date")
        return f"{day_and_time(start_date)[0]}/{day_and_time(end_date)[0]}"
