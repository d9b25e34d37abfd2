"""
clients/movie_client.py
------------------------

Client for the ``/movie`` endpoint and its ``/movie/{id}/quote``
sub-resource.  The sub-resource goes through the same URL building,
error mapping and decoding as every other request.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote

from lotr_sdk.clients.base_client import BaseResource
from lotr_sdk.core.config import OneApiConfig
from lotr_sdk.core.http_sync import Transport
from lotr_sdk.schemas.movie import Movie, MovieWithQuotes
from lotr_sdk.schemas.page import PagedResponse
from lotr_sdk.schemas.quote import Quote
from lotr_sdk.utils.pagination import AutoPaginator
from lotr_sdk.utils.request_options import RequestOptions


class MovieResource(BaseResource[Movie]):
    """Access to movies.

    The API path is singular (``/movie``) while the client exposes the
    accessor as ``client.movies``.
    """

    def __init__(self, config: OneApiConfig, transport: Transport) -> None:
        super().__init__("/movie", Movie, config, transport)

    def _quotes_of(self, movie_id: str) -> BaseResource[Quote]:
        path = f"{self.resource_path}/{quote(movie_id, safe='')}/quote"
        return BaseResource(path, Quote, self.config, self.transport)

    def get_quotes(self, movie_id: str, options: Optional[RequestOptions] = None) -> PagedResponse[Quote]:
        """Fetch one page of quotes spoken in a movie."""
        return self._quotes_of(movie_id).list(options)

    def list_all_quotes(self, movie_id: str, options: Optional[RequestOptions] = None) -> AutoPaginator[Quote]:
        """Lazily iterate over every quote of a movie."""
        return self._quotes_of(movie_id).list_all(options)

    def get_with_quotes(self, movie_id: str) -> MovieWithQuotes:
        """Fetch a movie and the first page of its quotes (two requests)."""
        movie = self.get_by_id(movie_id)
        quotes = self.get_quotes(movie_id)
        return MovieWithQuotes(movie=movie, quotes=quotes)
