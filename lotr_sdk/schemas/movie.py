"""
schemas/movie.py
-----------------

Models for the ``/movie`` endpoint.  Field names follow Python
conventions; the API's camelCase keys are mapped through aliases and
unknown keys are ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from lotr_sdk.schemas.page import PagedResponse
from lotr_sdk.schemas.quote import Quote


class Movie(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    runtime_in_minutes: int = Field(0, alias="runtimeInMinutes")
    budget_in_millions: float = Field(0.0, alias="budgetInMillions")
    box_office_revenue_in_millions: float = Field(0.0, alias="boxOfficeRevenueInMillions")
    academy_award_nominations: int = Field(0, alias="academyAwardNominations")
    academy_award_wins: int = Field(0, alias="academyAwardWins")
    rotten_tomatoes_score: float = Field(0.0, alias="rottenTomatoesScore")


class MovieWithQuotes(BaseModel):
    """A movie together with the first page of its quotes."""

    model_config = ConfigDict(frozen=True)

    movie: Movie
    quotes: PagedResponse[Quote]
