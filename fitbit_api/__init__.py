"""Typed client for the Fitbit Web API."""

from fitbit_api.auth import TokenRefresher
from fitbit_api.clients import BaseClient, FitbitClient, HttpClient
from fitbit_api.dates import InvalidDateError, day_and_time, to_datetime
from fitbit_api.pagination import PageSequence, PageState
from fitbit_api.responses import (
    ApiFailure,
    ApiResult,
    ApiSuccess,
    ResponseClassifier,
    UnhandledResponseError,
)
from fitbit_api.utils import dict_to_url_params

__all__ = [
    'ApiFailure',
    'ApiResult',
    'ApiSuccess',
    'BaseClient',
    'FitbitClient',
    'HttpClient',
    'InvalidDateError',
    'PageSequence',
    'PageState',
    'ResponseClassifier',
    'TokenRefresher',
    'UnhandledResponseError',
    'day_and_time',
    'dict_to_url_params',
    'to_datetime',
]
