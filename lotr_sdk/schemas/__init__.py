"""
Pydantic models for One API responses and field references.
"""

from .fields import FilterableField, MovieField, QuoteField, resolve_field_name
from .movie import Movie, MovieWithQuotes
from .page import PagedResponse
from .quote import Quote

__all__ = [
    "FilterableField",
    "MovieField",
    "QuoteField",
    "resolve_field_name",
    "Movie",
    "MovieWithQuotes",
    "PagedResponse",
    "Quote",
]
