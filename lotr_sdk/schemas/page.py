"""
schemas/page.py
----------------

Paged response envelope returned by every list endpoint:

    {"docs": [...], "total": 3, "limit": 1000, "offset": 0, "page": 1, "pages": 1}

:class:`PagedResponse` is generic over the item model, so the same
envelope decodes movies and quotes.  Instances are created fresh for
each response and are read-only afterwards.  Iterating a page yields
its items only; no further requests are made.
"""

from __future__ import annotations

from typing import Generic, Iterator, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PagedResponse(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    items: Tuple[T, ...] = Field(alias="docs")
    total: int = 0
    limit: int = 0
    offset: int = 0
    page: int = 0
    pages: int = 0

    @property
    def has_next_page(self) -> bool:
        return self.page < self.pages

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
