"""
core/rate_limit.py
-------------------

Rate-limit metadata reported by The One API.

Every rate-limited response carries three headers describing the
current request window.  They are parsed into an immutable
:class:`RateLimitMetadata` value that both the retry decorator and the
error taxonomy share.  Nothing here keeps state between calls: the
metadata only ever describes the response it was read from.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping, Optional

LIMIT_HEADER = "x-ratelimit-limit"
REMAINING_HEADER = "x-ratelimit-remaining"
RESET_HEADER = "x-ratelimit-reset"


def _header_int(headers: Mapping[str, str], name: str) -> int:
    raw = headers.get(name)
    if raw is None:
        return 0
    try:
        return int(str(raw).strip())
    except ValueError:
        return 0


@dataclass(frozen=True)
class RateLimitMetadata:
    """Request window information taken from response headers.

    A zero ``limit`` means the headers were absent or unreadable, i.e.
    the window is *unknown*, which is not the same as exhausted.
    """

    limit: int = 0
    remaining: int = 0
    reset_time: int = 0

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimitMetadata":
        """Parse metadata from a lower-cased header mapping.

        Missing or malformed values default to ``0``.
        """
        return cls(
            limit=_header_int(headers, LIMIT_HEADER),
            remaining=_header_int(headers, REMAINING_HEADER),
            reset_time=_header_int(headers, RESET_HEADER),
        )

    @property
    def is_known(self) -> bool:
        return self.limit > 0

    @property
    def is_exhausted(self) -> bool:
        """Whether the server reported no capacity left in this window.

        The comparison is ``remaining >= limit``.  A ``remaining <= 0``
        check may match the API's header semantics better; see DESIGN.md
        before changing.
        """
        return self.limit > 0 and self.remaining >= self.limit

    @property
    def reset_at(self) -> Optional[datetime]:
        if self.reset_time <= 0:
            return None
        return datetime.fromtimestamp(self.reset_time, tz=timezone.utc)
