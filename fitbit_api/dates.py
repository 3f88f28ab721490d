"""Flexible date handling.

Every endpoint that takes a date accepts any :data:`FlexibleDate`:

- the tokens ``"now"``, ``"today"`` and ``"yesterday"``
- a :class:`~fitbit_api.models.DateParts` mapping such as ``{"year": 2021, "month": 3}``
- an ISO or free-form date string, e.g. ``"2021-03-01"`` or ``"Mar 1 2021 10:30"``
  (the year is required, missing fields default as for ``DateParts``)
- a number of milliseconds since the epoch
- a ``datetime`` or ``date``

All of them resolve to a naive datetime in local time.
"""

import logging
import math
from collections.abc import Mapping
from datetime import date, datetime, time, timedelta
from typing import Any, Tuple, Union

from dateutil import parser

from fitbit_api.models import DateParts

logger = logging.getLogger(__name__)

FlexibleDate = Union[str, int, float, datetime, date, DateParts]

_PARSE_DEFAULT = datetime(2000, 1, 1)
_YEAR_CHECK_DEFAULT = datetime(2001, 1, 1)


class InvalidDateError(ValueError):
    """Raised when a value cannot be resolved to a calendar date."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f'date: "{value}" is an invalid date')


def _start_of_day(dt: datetime) -> datetime:
    return datetime.combine(dt.date(), time.min)


def _to_local(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt
    return dt.astimezone().replace(tzinfo=None)


def _parse_string(value: str) -> datetime:
    # Missing month, day and time fields default like DateParts, never to today
    parsed = parser.parse(value, default=_PARSE_DEFAULT)
    # A second default tells whether the year came from the string
    if parser.parse(value, default=_YEAR_CHECK_DEFAULT).year != parsed.year:
        raise ValueError(f"no year in date string: {value!r}")
    return parsed


def _from_parts(parts: Mapping[str, Any]) -> datetime:
    # 0 is treated like a missing month/day
    month = parts.get("month") or 1
    day = parts.get("day") or 1

    year, month_index = divmod(parts["year"] * 12 + month - 1, 12)
    return datetime(year, month_index + 1, 1) + timedelta(
        days=day - 1,
        hours=parts.get("hour") or 0,
        minutes=parts.get("minute") or 0,
        seconds=parts.get("second") or 0,
        milliseconds=parts.get("millisecond") or 0,
    )


def _resolve(value: FlexibleDate) -> datetime:
    if isinstance(value, str):
        if value == "now":
            return datetime.now()
        if value == "today":
            return _start_of_day(datetime.now())
        if value == "yesterday":
            return _start_of_day(datetime.now() - timedelta(days=1))
        return _to_local(_parse_string(value))

    # bool is an int subclass, never a timestamp
    if isinstance(value, bool):
        raise TypeError("booleans are not dates")

    if isinstance(value, datetime):
        return _to_local(value)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise ValueError("timestamp is not a finite number")
        return datetime.fromtimestamp(value / 1000)

    if isinstance(value, Mapping) and "year" in value:
        return _from_parts(value)

    raise TypeError(f"unsupported date value: {type(value).__name__}")


def to_datetime(value: FlexibleDate) -> datetime:
    """Resolve a flexible date to a local datetime.

    Raises:
        InvalidDateError: If the value cannot be interpreted as a date.
    """
    try:
        return _resolve(value)
    except (ValueError, TypeError, OverflowError, OSError) as e:
        logger.error(f'date: "{value}" is an invalid date')
        raise InvalidDateError(value) from e


def day_and_time(value: FlexibleDate, use_seconds: bool = False) -> Tuple[str, str]:
    """Format a flexible date as ``("YYYY-MM-DD", "HH:MM")``.

    With ``use_seconds`` the time part is ``HH:MM:SS``.
    """
    dt = to_datetime(value)

    day_str = f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
    time_str = f"{dt.hour:02d}:{dt.minute:02d}"
    if use_seconds:
        time_str += f":{dt.second:02d}"

    return day_str, time_str
