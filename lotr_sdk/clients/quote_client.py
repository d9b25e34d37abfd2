"""
clients/quote_client.py
------------------------

Client for the ``/quote`` endpoint.
"""

from __future__ import annotations

from lotr_sdk.clients.base_client import BaseResource
from lotr_sdk.core.config import OneApiConfig
from lotr_sdk.core.http_sync import Transport
from lotr_sdk.schemas.quote import Quote


class QuoteResource(BaseResource[Quote]):
    def __init__(self, config: OneApiConfig, transport: Transport) -> None:
        super().__init__("/quote", Quote, config, transport)
