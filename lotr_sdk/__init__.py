"""
lotr_sdk package
----------------

Python client for The One API (https://the-one-api.dev).  Importing
``lotr_sdk`` exposes the client, the query helpers and the error
taxonomy:

    from lotr_sdk import OneApiClient, Filter, RequestOptions, MovieField
"""

from .client import OneApiClient
from .clients.http_client import (
    RetryingTransport,
    RetryPolicy,
    exponential_backoff,
    fixed_backoff,
    no_backoff,
)
from .core.config import OneApiConfig, Settings, get_settings
from .core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DeserializationError,
    GenericApiError,
    NotFoundError,
    OneApiError,
    RateLimitError,
    TransportError,
)
from .core.http_sync import HttpResponse, HttpxTransport, RequestsTransport, Transport
from .core.rate_limit import RateLimitMetadata
from .schemas import Movie, MovieField, MovieWithQuotes, PagedResponse, Quote, QuoteField
from .utils import AutoPaginator, Filter, FilterExpression, RequestOptions, SortDirection

__version__ = "0.1.0"

__all__ = [
    "OneApiClient",
    "OneApiConfig",
    "Settings",
    "get_settings",
    "Transport",
    "HttpResponse",
    "HttpxTransport",
    "RequestsTransport",
    "RetryingTransport",
    "RetryPolicy",
    "exponential_backoff",
    "fixed_backoff",
    "no_backoff",
    "RateLimitMetadata",
    "OneApiError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitError",
    "GenericApiError",
    "TransportError",
    "DeserializationError",
    "Movie",
    "MovieWithQuotes",
    "Quote",
    "PagedResponse",
    "MovieField",
    "QuoteField",
    "Filter",
    "FilterExpression",
    "RequestOptions",
    "SortDirection",
    "AutoPaginator",
]
