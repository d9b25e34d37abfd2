"""
Query building and pagination helpers.
"""

from .filters import Filter, FilterExpression
from .pagination import AutoPaginator
from .request_options import RequestOptions, SortDirection

__all__ = [
    "Filter",
    "FilterExpression",
    "AutoPaginator",
    "RequestOptions",
    "SortDirection",
]
