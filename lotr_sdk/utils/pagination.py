"""
utils/pagination.py
--------------------

Lazy auto-pagination over a One API list endpoint.

:class:`AutoPaginator` walks every page of a resource on demand.  It is
an explicit state machine (current page, position inside it, next page
number, exhausted flag) rather than a generator, so the points where a
request may happen are easy to see and to test:

* nothing is fetched until the first ``has_next()`` / ``next()``;
* a page is requested only when the previous one has been drained;
* the walk ends when a page reports ``page >= pages`` or comes back
  empty.

Errors raised while fetching a page propagate from the ``next()`` call
that needed it.  The paginator never retries; rate-limit retries, if
any, already happened in the transport.  It is forward-only and cannot
be restarted; create a new one through ``list_all()`` instead.
"""

from __future__ import annotations

import logging
from typing import Generic, Iterator, Optional, Protocol, TypeVar

from lotr_sdk.logging_config import log_event
from lotr_sdk.schemas.page import PagedResponse
from lotr_sdk.utils.request_options import RequestOptions

T = TypeVar("T")


class PageSource(Protocol[T]):
    """Anything that can fetch one page, e.g. a resource client."""

    def list(self, options: Optional[RequestOptions] = None) -> PagedResponse[T]:
        ...


class AutoPaginator(Generic[T]):
    """Forward-only iterator over all items of a paged endpoint."""

    def __init__(self, source: PageSource[T], options: Optional[RequestOptions] = None) -> None:
        self._source = source
        self._base_options = options or RequestOptions()
        self._current_page: Optional[PagedResponse[T]] = None
        self._position = 0
        self._next_page = 1
        self._exhausted = False
        self._pages_fetched = 0

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    @property
    def current_page(self) -> Optional[PagedResponse[T]]:
        return self._current_page

    def has_next(self) -> bool:
        """Whether another item is available, fetching a page if needed."""
        if self._current_page is None:
            if self._exhausted:
                return False
            self._fetch_next_page()
        while self._position >= len(self._current_page.items):
            if self._exhausted or not self._current_page.has_next_page:
                self._exhausted = True
                return False
            self._fetch_next_page()
        return True

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        item = self._current_page.items[self._position]
        self._position += 1
        return item

    def _fetch_next_page(self) -> None:
        options = self._base_options.for_page(self._next_page)
        log_event("page_fetch", logging.DEBUG, page=self._next_page)
        page = self._source.list(options)
        self._current_page = page
        self._position = 0
        self._next_page += 1
        self._pages_fetched += 1
        if not page.items:
            self._exhausted = True
