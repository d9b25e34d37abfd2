"""
utils/filters.py
-----------------

Fluent builder for One API filter expressions.

The API filters through query parameters such as ``name=/Ring/i`` or
``budgetInMillions>200``.  :class:`Filter` produces those fragments so
callers never assemble raw query syntax themselves:

    Filter.where("name").matches_regex("/Ring/i")
    Filter.where(MovieField.BUDGET_IN_MILLIONS).greater_than(200)
    Filter.where("name").is_in("The Two Towers", "The Return of the King")

String values are form-encoded; regular expressions and numbers are
emitted verbatim.  The resulting :class:`FilterExpression` is an opaque,
already-encoded fragment ready for :class:`RequestOptions`.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Number
from urllib.parse import quote_plus

from lotr_sdk.schemas.fields import FieldRef, resolve_field_name


@dataclass(frozen=True)
class FilterExpression:
    """A compiled filter, e.g. ``name!=The+Hobbit``."""

    expression: str

    def to_query_param(self) -> str:
        return self.expression

    def __str__(self) -> str:
        return self.expression


class Filter:
    """Starts a filter expression bound to one field."""

    def __init__(self, field: str) -> None:
        self.field = field

    @classmethod
    def where(cls, field: FieldRef) -> "Filter":
        """Begin a filter for a raw field name or a field enum member.

        :raises ValueError: if the field name is blank
        """
        return cls(resolve_field_name(field))

    def equals(self, value: str) -> FilterExpression:
        return FilterExpression(f"{self.field}={_encode(value)}")

    def not_equals(self, value: str) -> FilterExpression:
        return FilterExpression(f"{self.field}!={_encode(value)}")

    def is_in(self, *values: str) -> FilterExpression:
        """Include filter: ``field=a,b,c``."""
        return FilterExpression(f"{self.field}={','.join(_encode(v) for v in values)}")

    def not_in(self, *values: str) -> FilterExpression:
        """Exclude filter: ``field!=a,b``."""
        return FilterExpression(f"{self.field}!={','.join(_encode(v) for v in values)}")

    def exists(self) -> FilterExpression:
        return FilterExpression(self.field)

    def does_not_exist(self) -> FilterExpression:
        return FilterExpression(f"!{self.field}")

    def matches_regex(self, regex: str) -> FilterExpression:
        """Regex match; ``regex`` includes its delimiters, e.g. ``/Ring/i``."""
        return FilterExpression(f"{self.field}={regex}")

    def less_than(self, value: Number) -> FilterExpression:
        return FilterExpression(f"{self.field}<{value}")

    def greater_than(self, value: Number) -> FilterExpression:
        return FilterExpression(f"{self.field}>{value}")

    def greater_than_or_equal(self, value: Number) -> FilterExpression:
        return FilterExpression(f"{self.field}>={value}")

    def less_than_or_equal(self, value: Number) -> FilterExpression:
        return FilterExpression(f"{self.field}<={value}")


def _encode(value: str) -> str:
    return quote_plus(str(value))
