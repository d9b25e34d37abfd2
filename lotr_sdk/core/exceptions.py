"""
core/exceptions.py
-------------------

Error taxonomy raised by the SDK.

Every failure surfaces as a subclass of :class:`OneApiError` so
callers can catch the whole family at once or a specific kind.  Errors
are never retried or swallowed by the SDK, with the single exception
of rate-limited responses inside
:class:`lotr_sdk.clients.http_client.RetryingTransport`.
"""

from __future__ import annotations

from typing import Optional

from lotr_sdk.core.rate_limit import RateLimitMetadata


class OneApiError(Exception):
    """Base class for all SDK errors.

    ``status_code`` is the HTTP status that caused the error, or ``0``
    when the failure did not come from an HTTP response.
    """

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthenticationError(OneApiError):
    """The API rejected the credential (HTTP 401)."""

    def __init__(self, message: str = "Invalid or missing API key") -> None:
        super().__init__(message, 401)


class NotFoundError(OneApiError):
    """The resource does not exist, or a by-ID lookup returned no items."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, 404)


class RateLimitError(OneApiError):
    """The request rate limit was hit (HTTP 429).

    Raised eagerly when the server reports an exhausted window, or
    once the retry budget has been spent.
    """

    def __init__(self, message: str, metadata: Optional[RateLimitMetadata] = None) -> None:
        super().__init__(message, 429)
        self.metadata = metadata or RateLimitMetadata()

    @property
    def limit(self) -> int:
        return self.metadata.limit

    @property
    def remaining(self) -> int:
        return self.metadata.remaining

    @property
    def reset_time(self) -> int:
        return self.metadata.reset_time


class GenericApiError(OneApiError):
    """Any other non-success status; keeps the raw response body."""

    def __init__(self, status_code: int, body: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"API error (HTTP {status_code}): {body}", status_code)
        self.body = body


class AuthorizationError(GenericApiError):
    """The credential is valid but not allowed to access the resource (HTTP 403)."""

    def __init__(self, body: str = "") -> None:
        super().__init__(403, body, message="Access to the resource is forbidden")


class TransportError(OneApiError):
    """The request never produced a response (connection, timeout, protocol)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class DeserializationError(OneApiError):
    """A successful response body could not be decoded into the expected shape."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
