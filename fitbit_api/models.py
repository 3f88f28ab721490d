"""Payload shapes for the Fitbit Web API.

These are shape hints only, nothing here validates a response.
"""

from typing import List, Optional, TypedDict


class _DatePartsBase(TypedDict):
    year: int


class DateParts(_DatePartsBase, total=False):
    """Structured date, 1-based ``month`` and ``day``.

    Omitted fields default to the lowest valid value; overflowing fields roll
    over into the next unit (``day=32`` of January is February 1st).
    """

    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int


class FitbitErrorEntry(TypedDict):
    errorType: str
    message: str


class FitbitError(TypedDict, total=False):
    """https://dev.fitbit.com/build/reference/web-api/troubleshooting-guide/error-messages/"""

    success: bool
    errors: List[FitbitErrorEntry]


class Pagination(TypedDict, total=False):
    afterDate: str
    beforeDate: str
    limit: int
    next: str
    offset: int
    previous: str
    sort: str


class SleepLog(TypedDict, total=False):
    logId: int
    dateOfSleep: str
    startTime: str
    endTime: str
    duration: int
    efficiency: int
    isMainSleep: bool
    minutesAsleep: int
    minutesAwake: int
    timeInBed: int
    type: str
    levels: dict


class ActivityLog(TypedDict, total=False):
    logId: int
    activityName: str
    activityTypeId: int
    startTime: str
    duration: int
    calories: int
    steps: int
    averageHeartRate: int
    logType: str


class Subscription(TypedDict):
    collectionType: str
    ownerId: str
    ownerType: str
    subscriberId: str
    subscriptionId: str


class Device(TypedDict, total=False):
    id: str
    battery: str
    batteryLevel: int
    deviceVersion: str
    lastSyncTime: str
    type: str
    mac: Optional[str]
