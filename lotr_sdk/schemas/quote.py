"""
schemas/quote.py
-----------------

Model for the ``/quote`` endpoint.  ``movie`` and ``character`` are the
IDs of the related resources.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="_id")
    dialog: str = ""
    movie: str = ""
    character: str = ""
