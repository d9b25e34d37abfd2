import json
from collections import deque
from typing import Dict, List, Optional, Tuple

import pytest

from lotr_sdk.client import OneApiClient
from lotr_sdk.core.http_sync import HttpResponse, Transport


class RecordingTransport(Transport):
    """In-memory transport returning queued responses and recording requests."""

    def __init__(self) -> None:
        self._responses = deque()
        self.requests: List[Tuple[str, str]] = []
        self.closed = False

    def enqueue(self, status_code: int, body: str = "", headers: Optional[Dict[str, str]] = None) -> None:
        self._responses.append(HttpResponse(status_code, body, headers or {}))

    def send(self, url: str, credential: str) -> HttpResponse:
        self.requests.append((url, credential))
        if not self._responses:
            raise AssertionError(f"Unexpected request to {url}")
        return self._responses.popleft()

    def close(self) -> None:
        self.closed = True

    @property
    def request_count(self) -> int:
        return len(self.requests)

    @property
    def urls(self) -> List[str]:
        return [url for url, _ in self.requests]


def _movie(movie_id: str, name: str, runtime: int, budget: float, revenue: float,
           nominations: int, wins: int, score: float) -> dict:
    return {
        "_id": movie_id,
        "name": name,
        "runtimeInMinutes": runtime,
        "budgetInMillions": budget,
        "boxOfficeRevenueInMillions": revenue,
        "academyAwardNominations": nominations,
        "academyAwardWins": wins,
        "rottenTomatoesScore": score,
    }


FELLOWSHIP = _movie("5cd95395de30eff6ebccde5c", "The Fellowship of the Ring", 178, 93, 871.5, 13, 4, 91)
TWO_TOWERS = _movie("5cd95395de30eff6ebccde5b", "The Two Towers", 179, 94, 926, 6, 2, 96)
RETURN_OF_THE_KING = _movie("5cd95395de30eff6ebccde5d", "The Return of the King", 201, 94, 1120, 11, 11, 95)

QUOTES = [
    {
        "_id": "5cd96e05de30eff6ebcce7e9",
        "dialog": "One Ring to rule them all.",
        "movie": "5cd95395de30eff6ebccde5d",
        "character": "5cd99d4bde30eff6ebccfbe6",
    },
    {
        "_id": "5cd96e05de30eff6ebcce7ea",
        "dialog": "My precious.",
        "movie": "5cd95395de30eff6ebccde5d",
        "character": "5cd99d4bde30eff6ebccfe9e",
    },
]


def envelope(docs: list, page: int = 1, pages: int = 1, limit: int = 1000, total: Optional[int] = None) -> str:
    return json.dumps({
        "docs": docs,
        "total": len(docs) if total is None else total,
        "limit": limit,
        "offset": (page - 1) * limit,
        "page": page,
        "pages": pages,
    })


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client(transport):
    return OneApiClient.create("test-key", transport=transport)


@pytest.fixture
def movie_list_json():
    return envelope([FELLOWSHIP, TWO_TOWERS, RETURN_OF_THE_KING])


@pytest.fixture
def single_movie_json():
    return envelope([RETURN_OF_THE_KING])


@pytest.fixture
def quote_list_json():
    return envelope(QUOTES)


@pytest.fixture
def empty_json():
    return envelope([], page=1, pages=0)


@pytest.fixture
def three_pages_json():
    """Three one-item pages, one movie each, in release order."""
    movies = [FELLOWSHIP, TWO_TOWERS, RETURN_OF_THE_KING]
    return [envelope([m], page=i + 1, pages=3, limit=1, total=3) for i, m in enumerate(movies)]


@pytest.fixture
def make_envelope():
    return envelope
