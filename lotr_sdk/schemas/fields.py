"""
schemas/fields.py
------------------

Type-safe field references used when filtering and sorting.

Each resource gets a string-backed enum whose members expose the raw
API field name through ``field_name``.  Filter and sort builders accept
either one of these members or a plain string, so a new resource only
needs a new enum; the builders stay unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class FilterableField(Protocol):
    """Anything that can name an API field."""

    @property
    def field_name(self) -> str:
        ...


class _FieldEnum(str, Enum):
    @property
    def field_name(self) -> str:
        return self.value


class MovieField(_FieldEnum):
    """Fields of the ``/movie`` resource."""

    ID = "_id"
    NAME = "name"
    RUNTIME_IN_MINUTES = "runtimeInMinutes"
    BUDGET_IN_MILLIONS = "budgetInMillions"
    BOX_OFFICE_REVENUE_IN_MILLIONS = "boxOfficeRevenueInMillions"
    ACADEMY_AWARD_NOMINATIONS = "academyAwardNominations"
    ACADEMY_AWARD_WINS = "academyAwardWins"
    ROTTEN_TOMATOES_SCORE = "rottenTomatoesScore"


class QuoteField(_FieldEnum):
    """Fields of the ``/quote`` resource."""

    ID = "_id"
    DIALOG = "dialog"
    MOVIE_ID = "movie"
    CHARACTER_ID = "character"


FieldRef = Union[str, FilterableField]


def resolve_field_name(field: FieldRef) -> str:
    """Return the raw API name for a field reference.

    :raises ValueError: if the name is missing or blank
    """
    if isinstance(field, FilterableField):
        name = field.field_name
    elif isinstance(field, str):
        name = field
    else:
        raise ValueError("Field must be a string or a field enum")
    if not name or not name.strip():
        raise ValueError("Field name must not be null or blank")
    return name
