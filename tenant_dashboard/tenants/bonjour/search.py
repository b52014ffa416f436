"""
Property search behind a fetch-like interface, plus the pending/result state
the search component keeps between reruns.

`MockPropertySearch` stands in for the supplier availability API: a
free-text query goes in, an ordered list of results comes back after a
simulated delay.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 1.5


@dataclass(frozen=True)
class SearchResult:
    name: str
    distance_miles: float
    available: bool


MOCK_RESULTS: Tuple[SearchResult, ...] = (
    SearchResult("Maison Serviced Apartments", 0.5, True),
    SearchResult("Crystal Property Shortlets", 1.2, False),
    SearchResult("London Aspect Apartments", 2.1, True),
)


@dataclass(frozen=True)
class SearchFilters:
    property_types: Tuple[str, ...] = ()
    amenities: Tuple[str, ...] = ()


class PropertySearchClient(Protocol):
    async def search(self, query: str, filters: SearchFilters) -> List[SearchResult]:
        ...


class MockPropertySearch:
    def __init__(self, delay: float = DEFAULT_DELAY_SECONDS, results: Tuple[SearchResult, ...] = MOCK_RESULTS):
        self.delay = delay
        self.results = results

    async def search(self, query: str, filters: SearchFilters = SearchFilters()) -> List[SearchResult]:
        logger.info("Searching properties near %r (%s)", query, filters)
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        # The mock ignores the query and filters, so every search gets the same list.
        return list(self.results)


@dataclass
class SearchSession:
    """Private search state of one component.

    Each `begin` issues a new token; results only land if they belong to the
    latest request, so a response that arrives after the user cleared the
    search (or started another one) is dropped. A failed request clears the
    pending token and keeps the error message for display.
    """

    query: str = ""
    filters: SearchFilters = SearchFilters()
    pending_token: Optional[int] = None
    results: List[SearchResult] = field(default_factory=list)
    searched: bool = False
    error: Optional[str] = None
    _next_token: int = 0

    @property
    def loading(self) -> bool:
        return self.pending_token is not None

    def begin(self, query: str, filters: SearchFilters = SearchFilters()) -> int:
        self._next_token += 1
        self.pending_token = self._next_token
        self.query = query.strip()
        self.filters = filters
        self.error = None
        return self.pending_token

    def resolve(self, token: int, results: List[SearchResult]) -> bool:
        if token != self.pending_token:
            logger.info("Discarding stale search results for request %d", token)
            return False
        self.results = list(results)
        self.pending_token = None
        self.searched = True
        return True

    def fail(self, token: int, message: str) -> bool:
        if token != self.pending_token:
            logger.info("Ignoring failure of stale search request %d", token)
            return False
        self.pending_token = None
        self.results = []
        self.searched = False
        self.error = message
        return True

    def discard(self) -> None:
        self.pending_token = None
        self.results = []
        self.searched = False
        self.query = ""
        self.filters = SearchFilters()
        self.error = None

    def available_results(self) -> List[SearchResult]:
        return [result for result in self.results if result.available]


def run_search(
    client: PropertySearchClient,
    session: SearchSession,
    query: str,
    filters: SearchFilters = SearchFilters(),
) -> bool:
    """Start a search on `session` and wait for it; True if results were applied.

    A client error is recorded on the session instead of propagating, so the
    component can show it and accept the next search.
    """
    token = session.begin(query, filters)
    try:
        results = asyncio.run(client.search(session.query, filters))
    except Exception as exc:
        logger.exception("Property search for %r failed", session.query)
        session.fail(token, f"Search failed: {exc}")
        return False
    return session.resolve(token, results)
