"""
logging_config.py
------------------

Shared logging utilities for the One API SDK.  The SDK uses Python's
built-in ``logging`` module and emits every message as a JSON string
so that applications can route it to ELK, Grafana or Datadog without
additional parsing rules.

Import ``logger`` and call its methods instead of ``logging.info``
directly.  The library itself never installs handlers; applications
that want console output can call :func:`configure_logging` once at
start-up.  Sensitive values such as the bearer credential are removed
before anything is written.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

# Package level logger.  Child modules log through this instance so the
# whole SDK can be silenced or redirected with a single logger name.
logger = logging.getLogger("lotr_sdk")
logger.addHandler(logging.NullHandler())

_SENSITIVE_KEYWORDS = ("token", "password", "secret", "authorization", "api_key", "apikey")


def configure_logging(level: int = logging.INFO) -> None:
    """Send SDK log records to stdout.

    Intended for scripts and applications; libraries embedding the SDK
    should configure logging themselves.

    :param level: minimum level for the ``lotr_sdk`` logger
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logger.setLevel(level)


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries have keys that look like credentials removed.  Lists
    and tuples are processed element-wise, byte strings are replaced by
    a size marker and anything that is not JSON serialisable is turned
    into its ``str`` form.

    Parameters
    ----------
    obj : Any
        Arbitrary Python object to sanitise.

    Returns
    -------
    Any
        A representation of the input suitable for ``json.dumps``.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in _SENSITIVE_KEYWORDS):
                continue
            clean[str(k)] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    return str(obj)


def log_event(event: str, level: int = logging.DEBUG, **fields: Any) -> None:
    """Log a structured event as a JSON message.

    :param event: short machine-friendly event name
    :param level: logging level to emit at
    :param fields: extra payload, sanitised before serialisation
    """
    if not logger.isEnabledFor(level):
        return
    data: Dict[str, Any] = {"event": event}
    data.update(_sanitize(fields))
    logger.log(level, json.dumps(data))


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     status: int | None = None, duration_ms: float | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    Transports call this once per exchange.  The ``Authorization``
    header is always dropped; only method, URL, status and duration
    are recorded.

    Parameters
    ----------
    method : str
        The HTTP method.
    url : str
        The URL being requested, including the query string.
    headers : dict, optional
        Request headers.  Sensitive keys are removed.
    status : int, optional
        Response status code, when one was received.
    duration_ms : float, optional
        Time taken in milliseconds.
    """
    fields: Dict[str, Any] = {"method": method, "url": url}
    if headers is not None:
        fields["headers"] = headers
    if status is not None:
        fields["status"] = status
    if duration_ms is not None:
        fields["duration_ms"] = round(duration_ms, 2)
    log_event("http_request", logging.DEBUG, **fields)
