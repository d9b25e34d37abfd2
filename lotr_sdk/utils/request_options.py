"""
utils/request_options.py
-------------------------

Filters, sorting and paging for a single list request.

:class:`RequestOptions` is an immutable pydantic model.  Fields left
unset are simply omitted from the query string; the object never
invents defaults for the server.  Example:

    RequestOptions(
        filters=[Filter.where("name").matches_regex("/Ring/i")],
        sort_field=MovieField.NAME,
        sort_direction=SortDirection.ASC,
        limit=10,
    )
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lotr_sdk.schemas.fields import resolve_field_name
from lotr_sdk.utils.filters import FilterExpression


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class RequestOptions(BaseModel):
    """Query options for list endpoints.

    ``filters`` accepts :class:`FilterExpression` objects or already
    encoded strings and is stored as a tuple of strings.  ``sort_field``
    accepts a raw name or a field enum member.
    """

    model_config = ConfigDict(frozen=True)

    filters: Tuple[str, ...] = ()
    sort_field: Optional[str] = None
    sort_direction: Optional[SortDirection] = None
    limit: Optional[int] = Field(default=None, ge=0)
    page: Optional[int] = Field(default=None, ge=1)
    offset: Optional[int] = Field(default=None, ge=0)

    @field_validator("filters", mode="before")
    @classmethod
    def _coerce_filters(cls, v: Any) -> Tuple[str, ...]:
        if v is None:
            return ()
        if isinstance(v, (str, FilterExpression)):
            v = [v]
        return tuple(str(f) for f in v)

    @field_validator("sort_field", mode="before")
    @classmethod
    def _coerce_sort_field(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return resolve_field_name(v)

    def to_query_string(self) -> str:
        """Serialise to a query string without the leading ``?``.

        Order: filters, ``sort``, ``limit``, ``page``, ``offset``.
        Returns an empty string when nothing is set.
        """
        parts: List[str] = list(self.filters)
        if self.sort_field is not None and self.sort_direction is not None:
            parts.append(f"sort={self.sort_field}:{self.sort_direction.value}")
        if self.limit is not None:
            parts.append(f"limit={self.limit}")
        if self.page is not None:
            parts.append(f"page={self.page}")
        if self.offset is not None:
            parts.append(f"offset={self.offset}")
        return "&".join(parts)

    def for_page(self, page: int) -> "RequestOptions":
        """Copy with ``page`` overridden and ``offset`` dropped."""
        return self.model_copy(update={"page": page, "offset": None})
