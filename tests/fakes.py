# File: tests/fakes.py
"""Test doubles shared by the test modules."""
import asyncio
from collections import Counter
from typing import Dict, Iterable, List, Tuple

from dead_link_hunter.config import HunterConfig
from dead_link_hunter.crawler.fetcher import Fetcher
from dead_link_hunter.crawler.models import FetchResult
from dead_link_hunter.errors import FetchNetworkError

SEED = "http://example.test/"

Site = Dict[str, Tuple[int, List[str]]]


class FakeFetcher(Fetcher):
    """
    In-memory site: ``url -> (status, hrefs)``; unknown URLs answer 404.
    Records every call so tests can assert on fetch counts and parallelism.
    """

    def __init__(
        self,
        site: Site,
        *,
        depth_limited: bool = True,
        delay: float = 0.0,
        failing: Iterable[str] = (),
        config: HunterConfig | None = None,
    ) -> None:
        super().__init__(config or HunterConfig(seed_url=SEED, engine="static"))
        self.site = site
        self.depth_limited = depth_limited
        self.delay = delay
        self.failing = set(failing)
        self.calls: Counter = Counter()
        self.heads: Counter = Counter()
        self.followed: Dict[str, bool] = {}
        self.in_flight = 0
        self.max_in_flight = 0
        self.opened = False
        self.closed = False

    async def open(self) -> None:
        self.opened = True

    async def close(self) -> None:
        self.closed = True

    async def fetch(self, url: str, *, follow_links: bool = True) -> FetchResult:
        self.calls[url] += 1
        self.followed[url] = follow_links
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            if url in self.failing:
                raise FetchNetworkError(url, "connection refused")
            status, hrefs = self.site.get(url, (404, []))
            if status > 299 or not follow_links:
                return FetchResult(url, status)
            return FetchResult(url, status, list(hrefs))
        finally:
            self.in_flight -= 1

    async def head(self, url: str) -> FetchResult:
        self.heads[url] += 1
        status, _ = self.site.get(url, (404, []))
        return FetchResult(url, status)

    @property
    def fetched(self) -> set:
        return set(self.calls) | set(self.heads)


