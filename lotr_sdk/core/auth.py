"""
core/auth.py
-------------

Helpers for building authenticated requests to The One API.

The API authenticates every call with a static bearer key.  Keeping
header construction in one place ensures each transport sends exactly
the same headers and that the key is never logged elsewhere.
"""

from __future__ import annotations

from typing import Dict

USER_AGENT = "lotr-sdk-python"


def build_auth_headers(credential: str) -> Dict[str, str]:
    """Create the HTTP headers required for an authenticated call.

    :param credential: the One API access key
    :return: a dictionary of headers suitable for httpx or requests
    """
    return {
        "Authorization": f"Bearer {credential}",
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }


def mask_credential(credential: str) -> str:
    """Return a loggable form of a credential, keeping only its last 4 chars."""
    if not credential:
        return ""
    if len(credential) <= 4:
        return "****"
    return "****" + credential[-4:]
