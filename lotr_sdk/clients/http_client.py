"""
clients/http_client.py
----------------------

Rate-limit aware retry decorator for transports.

:class:`RetryingTransport` wraps any :class:`~lotr_sdk.core.http_sync.Transport`
and exposes the same contract.  Only HTTP 429 responses are
intercepted; every other response, successful or not, is handed back
to the caller untouched and transport errors propagate immediately.

When the server says the current window is exhausted the decorator
fails at once instead of sleeping, since no capacity will come back
before the window resets.  Otherwise it waits ``backoff(attempt)``
seconds on the calling thread and tries again, up to
``max_retries`` times.

Usage example:

    transport = RetryingTransport(HttpxTransport(), RetryPolicy(max_retries=3))
    resp = transport.send(url, api_key)
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from lotr_sdk.core.exceptions import RateLimitError
from lotr_sdk.core.http_sync import HttpResponse, HttpStatus, Transport
from lotr_sdk.core.rate_limit import RateLimitMetadata
from lotr_sdk.logging_config import log_event

BackoffFn = Callable[[int], float]

WINDOW_EXHAUSTED_MESSAGE = "No more requests remaining in the current rate window"


def exponential_backoff(base: float = 1.0) -> BackoffFn:
    """Return ``base * 2 ** attempt`` seconds: 1s, 2s, 4s with the default base."""

    def backoff(attempt: int) -> float:
        return base * (2 ** attempt)

    return backoff


def fixed_backoff(seconds: float) -> BackoffFn:
    """Return the same delay for every attempt."""

    def backoff(attempt: int) -> float:
        return seconds

    return backoff


def no_backoff(attempt: int) -> float:
    return 0.0


@dataclass(frozen=True)
class RetryPolicy:
    """How many times to retry a rate-limited request and how long to wait.

    ``backoff`` maps the zero-based retry attempt to a delay in seconds.
    """

    max_retries: int = 3
    backoff: BackoffFn = field(default_factory=exponential_backoff)

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")


class RetryingTransport(Transport):
    """Transport decorator adding bounded retry on HTTP 429.

    The policy and the wrapped transport are read-only after
    construction, so one instance can serve many threads.
    """

    def __init__(self, delegate: Transport, policy: RetryPolicy | None = None) -> None:
        self.delegate = delegate
        self.policy = policy or RetryPolicy()

    @property
    def max_retries(self) -> int:
        return self.policy.max_retries

    def send(self, url: str, credential: str) -> HttpResponse:
        """Send the request, retrying rate-limited responses.

        Raises:
            RateLimitError: If the window is exhausted, or the response is
                still rate limited after ``max_retries`` retries.
            TransportError: Propagated unchanged from the wrapped transport.
        """
        response = self.delegate.send(url, credential)
        attempt = 0
        while response.status_code == HttpStatus.TOO_MANY_REQUESTS and attempt < self.policy.max_retries:
            metadata = RateLimitMetadata.from_headers(response.headers)
            if metadata.is_exhausted:
                self._log_exhausted(url, metadata, attempt)
                raise RateLimitError(WINDOW_EXHAUSTED_MESSAGE, metadata)
            wait = self.policy.backoff(attempt)
            log_event(
                "rate_limit_retry",
                logging.WARNING,
                url=url,
                attempt=attempt + 1,
                max_retries=self.policy.max_retries,
                wait_seconds=wait,
            )
            if wait > 0:
                time.sleep(wait)
            response = self.delegate.send(url, credential)
            attempt += 1

        if response.status_code == HttpStatus.TOO_MANY_REQUESTS:
            metadata = RateLimitMetadata.from_headers(response.headers)
            self._log_exhausted(url, metadata, attempt)
            if metadata.is_exhausted:
                raise RateLimitError(WINDOW_EXHAUSTED_MESSAGE, metadata)
            raise RateLimitError(
                f"Rate limit exceeded after {self.policy.max_retries} retries", metadata
            )
        return response

    def close(self) -> None:
        self.delegate.close()

    @staticmethod
    def _log_exhausted(url: str, metadata: RateLimitMetadata, attempts: int) -> None:
        log_event(
            "rate_limit_exhausted",
            logging.WARNING,
            url=url,
            retries=attempts,
            limit=metadata.limit,
            remaining=metadata.remaining,
            reset_time=metadata.reset_time,
        )
