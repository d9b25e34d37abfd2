import json
import logging

from lotr_sdk.core.auth import build_auth_headers
from lotr_sdk.logging_config import _sanitize, log_event, log_http_request


def test_sanitize_drops_sensitive_keys():
    cleaned = _sanitize({
        "url": "https://the-one-api.dev/v2/movie",
        "headers": {"Authorization": "Bearer abc", "Accept": "application/json"},
        "api_key": "abc",
        "payload": b"\x00\x01",
    })

    assert cleaned == {
        "url": "https://the-one-api.dev/v2/movie",
        "headers": {"Accept": "application/json"},
        "payload": "<binary 2 bytes>",
    }


def test_log_event_emits_json(caplog):
    with caplog.at_level(logging.DEBUG, logger="lotr_sdk"):
        log_event("page_fetch", logging.INFO, page=2)

    assert json.loads(caplog.records[-1].getMessage()) == {"event": "page_fetch", "page": 2}
    assert caplog.records[-1].levelno == logging.INFO


def test_http_request_log_never_contains_credential(caplog):
    with caplog.at_level(logging.DEBUG, logger="lotr_sdk"):
        log_http_request("GET", "https://the-one-api.dev/v2/movie",
                         headers=build_auth_headers("top-secret"), status=200, duration_ms=12.3456)

    message = caplog.records[-1].getMessage()
    assert "top-secret" not in message
    assert json.loads(message)["duration_ms"] == 12.35
