"""
core/http_sync.py
------------------

Synchronous HTTP transports for The One API.

A transport performs exactly one GET exchange and returns the status,
body and headers verbatim.  It does not retry and does not interpret
status codes; classification happens in the resource clients and
rate-limit retries in :mod:`lotr_sdk.clients.http_client`.

Two implementations are provided:

* :class:`HttpxTransport` (the default) built on a single shared
  ``httpx.Client`` so connections are reused across calls.
* :class:`RequestsTransport` built on ``requests.Session`` for
  applications that already standardise on ``requests``.

Usage example:

    transport = HttpxTransport(timeout=10.0)
    resp = transport.send("https://the-one-api.dev/v2/movie", api_key)
"""

from __future__ import annotations

import abc
import threading
import time
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

import httpx
import requests

from lotr_sdk.core.auth import build_auth_headers
from lotr_sdk.core.exceptions import TransportError
from lotr_sdk.logging_config import log_event, log_http_request

DEFAULT_TIMEOUT: float = 10.0


class HttpStatus:
    """HTTP status codes the SDK reacts to."""

    OK = 200
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    TOO_MANY_REQUESTS = 429


@dataclass(frozen=True)
class HttpResponse:
    """One HTTP exchange result, decoupled from any client library.

    Header names are lower-cased on construction so lookups do not
    depend on the casing the server used.
    """

    status_code: int
    body: str
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", {str(k).lower(): str(v) for k, v in self.headers.items()})

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.headers.get(name.lower(), default)


class Transport(abc.ABC):
    """Sends a single authenticated GET request.

    Implementations must be safe to share between threads: one client
    wires the same transport into every resource it exposes.
    """

    @abc.abstractmethod
    def send(self, url: str, credential: str) -> HttpResponse:
        """Perform a GET request and return the response verbatim.

        Args:
            url: Fully-qualified URL including the query string.
            credential: Bearer credential for the ``Authorization`` header.

        Returns:
            The response, whatever its status code.

        Raises:
            TransportError: If no response could be obtained.
        """

    def close(self) -> None:
        """Release any pooled resources held by the transport."""


class HttpxTransport(Transport):
    """Default transport backed by one ``httpx.Client``."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, client: Optional[httpx.Client] = None) -> None:
        self.timeout = timeout
        self._owns_client = client is None
        # httpx.Client pools connections and is safe to share across threads
        self._client = client or httpx.Client(timeout=timeout)

    def send(self, url: str, credential: str) -> HttpResponse:
        headers = build_auth_headers(credential)
        start_time = time.time()
        try:
            resp = self._client.get(url, headers=headers, timeout=self.timeout)
        except httpx.HTTPError as exc:
            duration_ms = (time.time() - start_time) * 1000
            log_event("http_error", method="GET", url=url, detail=str(exc), duration_ms=round(duration_ms, 2))
            raise TransportError(f"HTTP request failed: {exc}", cause=exc) from exc
        duration_ms = (time.time() - start_time) * 1000
        log_http_request("GET", url, headers=headers, status=resp.status_code, duration_ms=duration_ms)
        return HttpResponse(resp.status_code, resp.text, dict(resp.headers.items()))

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


class RequestsTransport(Transport):
    """Alternative transport backed by ``requests.Session``.

    ``requests.Session`` is not documented as thread-safe, so when no
    session is supplied each calling thread gets its own, created on
    first use.  A caller-supplied session is shared as-is and its
    thread safety is the caller's concern.

    ``timeout`` accepts either a single number or a
    ``(connect, read)`` tuple, as ``requests`` does.
    """

    def __init__(self, timeout: float | tuple = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None) -> None:
        self.timeout = timeout
        self._shared_session = session
        self._local = threading.local()
        self._lock = threading.Lock()
        self._owned_sessions: List[requests.Session] = []

    def _session(self) -> requests.Session:
        if self._shared_session is not None:
            return self._shared_session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._lock:
                self._owned_sessions.append(session)
        return session

    def send(self, url: str, credential: str) -> HttpResponse:
        headers: Dict[str, str] = build_auth_headers(credential)
        start_time = time.time()
        try:
            resp = self._session().get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            duration_ms = (time.time() - start_time) * 1000
            log_event("http_error", method="GET", url=url, detail=str(exc), duration_ms=round(duration_ms, 2))
            raise TransportError(f"HTTP request failed: {exc}", cause=exc) from exc
        duration_ms = (time.time() - start_time) * 1000
        log_http_request("GET", url, headers=headers, status=resp.status_code, duration_ms=duration_ms)
        return HttpResponse(resp.status_code, resp.text, dict(resp.headers.items()))

    def close(self) -> None:
        with self._lock:
            sessions, self._owned_sessions = self._owned_sessions, []
        for session in sessions:
            session.close()
