"""
client.py
----------

Entry point of the SDK.

:class:`OneApiClient` wires one transport into every resource accessor.
Unless the caller supplies its own transport, the default pipeline is
an :class:`~lotr_sdk.core.http_sync.HttpxTransport` wrapped in a
:class:`~lotr_sdk.clients.http_client.RetryingTransport`.  A custom
transport is used as-is: the caller owns the whole pipeline, retries
included.

Usage
-----

.. code-block:: python

    with OneApiClient.create("your-api-key") as client:
        for movie in client.movies.list_all():
            print(movie.name)

    # or from LOTR_API_KEY / LOTR_* environment variables
    client = OneApiClient.from_settings()
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from lotr_sdk.clients.http_client import RetryingTransport, RetryPolicy
from lotr_sdk.clients.movie_client import MovieResource
from lotr_sdk.clients.quote_client import QuoteResource
from lotr_sdk.core.auth import mask_credential
from lotr_sdk.core.config import DEFAULT_BASE_URL, OneApiConfig, Settings
from lotr_sdk.core.http_sync import HttpxTransport, Transport
from lotr_sdk.logging_config import log_event


def build_transport(config: OneApiConfig) -> Transport:
    """Create the default transport stack for ``config``."""
    policy = RetryPolicy(max_retries=config.max_retries, backoff=config.backoff)
    return RetryingTransport(HttpxTransport(timeout=config.timeout), policy)


class OneApiClient:
    """Client for The One API.

    Thread-safe: resources share one transport and keep no mutable
    state.  Each ``list_all()`` call returns its own paginator.
    """

    def __init__(self, config: OneApiConfig, transport: Optional[Transport] = None) -> None:
        self.config = config
        self.transport = transport if transport is not None else build_transport(config)
        self._movies = MovieResource(config, self.transport)
        self._quotes = QuoteResource(config, self.transport)
        log_event(
            "client_created",
            logging.DEBUG,
            base_url=config.base_url,
            credential=mask_credential(config.api_key),
            custom_transport=transport is not None,
        )

    @classmethod
    def create(
        cls,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        max_retries: int = 3,
        backoff: Optional[Callable[[int], float]] = None,
        transport: Optional[Transport] = None,
    ) -> "OneApiClient":
        """Build a client from keyword arguments.

        :raises pydantic.ValidationError: if ``api_key`` is blank or a
            value is out of range
        """
        values: Dict[str, Any] = {
            "api_key": api_key,
            "base_url": base_url,
            "timeout": timeout,
            "max_retries": max_retries,
        }
        if backoff is not None:
            values["backoff"] = backoff
        return cls(OneApiConfig(**values), transport=transport)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None,
                      transport: Optional[Transport] = None) -> "OneApiClient":
        """Build a client from ``LOTR_*`` environment settings."""
        return cls(OneApiConfig.from_settings(settings), transport=transport)

    @property
    def movies(self) -> MovieResource:
        return self._movies

    @property
    def quotes(self) -> QuoteResource:
        return self._quotes

    def close(self) -> None:
        """Close the underlying transport and release resources."""
        self.transport.close()

    def __enter__(self) -> "OneApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
