"""Cursor based paging over Fitbit list endpoints.

List endpoints return one page of entries plus a ``pagination`` record whose
``next`` field is the URL of the following page (empty on the last page).
:class:`PageSequence` follows those links one pull at a time.

Example::

    pages = client.sleep.get_log_list(before_date="today", limit=10)
    for state in pages:
        print(len(state.all_data), "logs so far")
    final = pages.result
    if not final.last_response.is_success:
        print(final.last_response.error)
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generator, Generic, List, Optional, TypeVar

from fitbit_api.models import Pagination
from fitbit_api.responses import ApiResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class PageState(Generic[T]):
    """Snapshot of a page walk.

    Each snapshot owns its ``all_data`` list; later pages never mutate a
    snapshot that was already handed out.
    """

    last_response: ApiResult
    all_data: List[T]
    total_calls: int

    @property
    def next_url(self) -> str:
        """Cursor of the following page, ``""`` when there is none."""
        return _next_url(self.last_response)


def _next_url(result: ApiResult) -> str:
    if not result.is_success or not isinstance(result.data, dict):
        return ""
    pagination: Pagination = result.data.get("pagination") or {}
    return pagination.get("next") or ""


def _page_items(result: ApiResult, data_key: str) -> List[Any]:
    if not isinstance(result.data, dict):
        return []
    return list(result.data.get(data_key) or [])


class PageSequence(Generic[T]):
    """Lazy, single pass walk over every page of a list endpoint.

    The first page is fetched when the sequence is created. Iterating yields
    a :class:`PageState` for every page that still has a successor. The
    state reached on the last page, or on the first failed page, is not
    yielded: it is stored in :attr:`result` once iteration stops. No request
    is made past a failure.

    Stop iterating to stop fetching. A sequence cannot be restarted; ask the
    endpoint for a new one instead.
    """

    def __init__(self, fetch: Callable[[str], ApiResult], first_url: str, data_key: str):
        self.data_key = data_key
        self.result: Optional[PageState[T]] = None
        self._fetch = fetch
        self._first = fetch(first_url)
        self._last: Optional[PageState[T]] = None
        self._pages = self._walk(self._first)

    def __iter__(self):
        return self

    def __next__(self) -> PageState[T]:
        try:
            self._last = next(self._pages)
            return self._last
        except StopIteration as stop:
            if self.result is None:
                self.result = stop.value
            raise

    @property
    def done(self) -> bool:
        return self.result is not None

    def has_next(self) -> bool:
        """Whether another pull yields a snapshot or fetches a page."""
        if self.done:
            return False
        if self._last is None:
            return self._first.is_success
        return bool(self._last.next_url)

    def collect(self) -> PageState[T]:
        """Fetch every remaining page and return the final state."""
        for _ in self:
            pass
        return self.result

    def _walk(self, last_response: ApiResult) -> Generator[PageState[T], None, PageState[T]]:
        total_calls = 1

        if not last_response.is_success:
            logger.warning(f"First page of '{self.data_key}' failed with HTTP {last_response.code}")
            return PageState(last_response, [], total_calls)

        all_data = _page_items(last_response, self.data_key)
        yield PageState(last_response, list(all_data), total_calls)

        next_url = _next_url(last_response)
        while next_url:
            last_response = self._fetch(next_url)
            total_calls += 1

            if not last_response.is_success:
                logger.warning(
                    f"Page {total_calls} of '{self.data_key}' failed with HTTP {last_response.code}"
                )
                return PageState(last_response, list(all_data), total_calls)

            next_url = _next_url(last_response)
            all_data = all_data + _page_items(last_response, self.data_key)

            if next_url:
                yield PageState(last_response, list(all_data), total_calls)

        logger.debug(f"Fetched {len(all_data)} '{self.data_key}' entries in {total_calls} calls")
        return PageState(last_response, list(all_data), total_calls)
