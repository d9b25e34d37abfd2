"""
clients/base_client.py
-----------------------

Shared machinery for One API resource clients.

:class:`BaseResource` turns a logical ``list``/``get_by_id`` call into a
request URL, sends it through the configured transport (usually the
rate-limit retrying one), maps non-success status codes onto the SDK
error taxonomy and decodes the JSON envelope into a typed
:class:`~lotr_sdk.schemas.page.PagedResponse`.

Adding a resource only takes a subclass naming its path and item
model, e.g. ``super().__init__("/book", Book, config, transport)``.
"""

from __future__ import annotations

import logging
from typing import Generic, Optional, Type, TypeVar
from urllib.parse import quote, urlsplit, urlunsplit

from pydantic import BaseModel, ValidationError

from lotr_sdk.core.config import OneApiConfig
from lotr_sdk.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DeserializationError,
    GenericApiError,
    NotFoundError,
    RateLimitError,
)
from lotr_sdk.core.http_sync import HttpResponse, HttpStatus, Transport
from lotr_sdk.core.rate_limit import RateLimitMetadata
from lotr_sdk.logging_config import log_event
from lotr_sdk.schemas.page import PagedResponse
from lotr_sdk.utils.pagination import AutoPaginator
from lotr_sdk.utils.request_options import RequestOptions

T = TypeVar("T", bound=BaseModel)


def build_url(base_url: str, path: str, options: Optional[RequestOptions] = None) -> str:
    """Join ``base_url`` and ``path`` and attach the options query string.

    The scheme and authority of ``base_url`` are kept exactly; its path
    is extended by ``path`` without doubling slashes.  ``?query`` is
    only appended when the options produce a non-empty string.
    """
    base = urlsplit(base_url)
    full_path = base.path.rstrip("/") + "/" + path.lstrip("/")
    query = options.to_query_string() if options is not None else ""
    return urlunsplit((base.scheme, base.netloc, full_path, query, ""))


class BaseResource(Generic[T]):
    """Resource accessor for one API path and item model."""

    def __init__(self, resource_path: str, item_type: Type[T], config: OneApiConfig,
                 transport: Transport) -> None:
        self.resource_path = resource_path
        self.item_type = item_type
        self.config = config
        self.transport = transport

    def list(self, options: Optional[RequestOptions] = None) -> PagedResponse[T]:
        """Fetch one page of items.

        :param options: filters, sort and paging; ``None`` sends no query
        :raises OneApiError: a subclass describing the failure
        """
        return self._fetch_page(self.resource_path, options)

    def get_by_id(self, item_id: str) -> T:
        """Fetch a single item.

        :raises NotFoundError: on HTTP 404 or when the envelope has no items
        """
        path = f"{self.resource_path}/{quote(item_id, safe='')}"
        page = self._fetch_page(path, None)
        if not page.items:
            raise NotFoundError(f"Resource not found: {path}")
        return page.items[0]

    def list_all(self, options: Optional[RequestOptions] = None) -> AutoPaginator[T]:
        """Lazily iterate over every item on every page.

        ``page`` and ``offset`` in ``options`` are ignored; filters, sort
        and ``limit`` (the page size) are carried to each request.
        """
        return AutoPaginator(self, options)

    # --- internal helpers ---

    def _fetch_page(self, path: str, options: Optional[RequestOptions]) -> PagedResponse[T]:
        url = build_url(self.config.base_url, path, options)
        response = self.transport.send(url, self.config.api_key)
        self._raise_for_status(response, url)
        return self._deserialize_page(response.body)

    def _raise_for_status(self, response: HttpResponse, url: str) -> None:
        status = response.status_code
        if status == HttpStatus.OK:
            return
        log_event("api_error", logging.INFO, url=url, status=status)
        if status == HttpStatus.UNAUTHORIZED:
            raise AuthenticationError()
        if status == HttpStatus.FORBIDDEN:
            raise AuthorizationError(response.body)
        if status == HttpStatus.NOT_FOUND:
            raise NotFoundError()
        if status == HttpStatus.TOO_MANY_REQUESTS:
            raise RateLimitError("Rate limit exceeded", RateLimitMetadata.from_headers(response.headers))
        raise GenericApiError(status, response.body)

    def _deserialize_page(self, body: str) -> PagedResponse[T]:
        try:
            return PagedResponse[self.item_type].model_validate_json(body)
        except ValidationError as exc:
            raise DeserializationError(f"Failed to parse API response: {exc}", cause=exc) from exc
