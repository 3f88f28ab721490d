"""Response classification and automatic token refresh.

Every call made through :class:`~fitbit_api.clients.fitbit.FitbitClient`
resolves to an :data:`ApiResult`: either :class:`ApiSuccess` carrying the
parsed payload or :class:`ApiFailure` carrying Fitbit's error document.
Ordinary upstream errors are returned, not raised. Check ``is_success``
before touching ``data`` or ``error``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Generic, Optional, TypeVar, Union

import requests

from fitbit_api.models import FitbitError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Error types that mean the bearer token has to be replaced
TOKEN_ERROR_TYPES = ("expired_token", "invalid_token")

# Retries after a refresh; a third rejection is returned to the caller
MAX_REFRESH_ATTEMPTS = 2


class UnhandledResponseError(Exception):
    """Raised when a failed response has a body that is not JSON."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Unhandled error: HTTP {status_code} from {url or 'unknown url'}")


@dataclass
class ApiSuccess(Generic[T]):
    """Successful call with its parsed payload."""

    code: int
    data: T
    response: requests.Response
    headers: Dict[str, str]

    is_success: ClassVar[bool] = True


@dataclass
class ApiFailure:
    """Failed call.

    ``error`` is Fitbit's error document, or ``None`` when the body did not
    contain one.
    """

    code: int
    error: Optional[FitbitError]
    response: requests.Response
    headers: Dict[str, str]

    is_success: ClassVar[bool] = False

    @property
    def error_type(self) -> Optional[str]:
        """``errorType`` of the first reported error, if any."""
        if not self.error or not self.error.get("errors"):
            return None
        return self.error["errors"][0].get("errorType")


ApiResult = Union[ApiSuccess[T], ApiFailure]


def _is_ok(status_code: int) -> bool:
    return 200 <= status_code < 300


def _is_server_error(status_code: int) -> bool:
    return 500 <= status_code < 600


class ResponseClassifier:
    """Turn transport responses into :data:`ApiResult` values.

    When Fitbit reports an expired or invalid token and ``get_token`` is
    set, a new token is fetched, handed to ``set_token`` and the call is
    repeated, at most :data:`MAX_REFRESH_ATTEMPTS` times.

    ``set_token`` is expected to change the default ``Authorization`` header
    of the owning client, so a refresh affects every later call made through
    that client, not only the one being retried.
    """

    def __init__(
        self,
        set_token: Callable[[str], None],
        get_token: Optional[Callable[[], str]] = None,
    ):
        self.set_token = set_token
        self.get_token = get_token

    def classify(
        self, perform_call: Callable[[], requests.Response], attempts: int = 0
    ) -> ApiResult:
        """Run ``perform_call`` and classify its response.

        Args:
            perform_call: Zero-argument callable issuing the request. It is
                invoked again for every retry, so it must read the current
                headers at call time.
            attempts: Refresh retries already made for this call.

        Raises:
            UnhandledResponseError: The response failed outside the 5xx
                range and its body is not JSON.
        """
        while True:
            result = self._build_result(perform_call())

            if not self._should_refresh(result, attempts):
                return result

            logger.info(
                f"Access token rejected ({result.error_type}), refreshing "
                f"(attempt {attempts + 1} of {MAX_REFRESH_ATTEMPTS})"
            )
            try:
                self.set_token(self.get_token())
            except Exception as e:
                logger.error(f"Token refresh failed: {e}")
                return result

            attempts += 1

    def _should_refresh(self, result: ApiResult, attempts: int) -> bool:
        return (
            not result.is_success
            and result.error_type in TOKEN_ERROR_TYPES
            and self.get_token is not None
            and attempts < MAX_REFRESH_ATTEMPTS
        )

    def _build_result(self, response: requests.Response) -> ApiResult:
        headers = {key.lower(): value for key, value in response.headers.items()}
        code = response.status_code

        try:
            payload = response.json()
        except ValueError:
            if not _is_ok(code):
                if not _is_server_error(code):
                    logger.error(f"Unhandled error: HTTP {code} without a JSON body")
                    raise UnhandledResponseError(code, getattr(response, "url", None))
                logger.error(f"Fitbit internal error: HTTP {code}")
            payload = None

        has_errors = isinstance(payload, dict) and "errors" in payload

        if not _is_ok(code) or has_errors:
            return ApiFailure(
                code=code,
                error=payload if has_errors else None,
                response=response,
                headers=headers,
            )

        return ApiSuccess(code=code, data=payload, response=response, headers=headers)
