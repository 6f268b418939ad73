# === FILE: dead_link_hunter/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from functools import partial
from typing import Any, Iterable, Optional

from dead_link_hunter.aggregator import ROOT_REFERRER, DeadLinkAggregator, DeadLinkReport
from dead_link_hunter.config import HunterConfig
from dead_link_hunter.crawler.fetcher import Fetcher, StaticFetcher
from dead_link_hunter.crawler.ledger import VisitationLedger
from dead_link_hunter.crawler.models import CrawlStats
from dead_link_hunter.errors import FetchError, HrefRejected
from dead_link_hunter.logger import LOGGER_NAME
from dead_link_hunter.utils import (
    extract_protocol_and_domain,
    is_in_scope,
    normalize_url,
    resolve_href,
)

__all__ = ("Crawler", "create_fetcher")


def create_fetcher(config: HunterConfig) -> Fetcher:
    """Engine selected by ``config.engine``."""
    if config.engine == "static":
        return StaticFetcher(config)
    # imported lazily so the static engine works without a browser install
    from dead_link_hunter.crawler.browser import BrowserFetcher

    return BrowserFetcher(config)


class Crawler:
    """
    Recursive dead-link crawler.

    Every discovered in-scope link becomes its own task in one
    :class:`asyncio.TaskGroup`, so :meth:`hunt` returns only when the whole
    transitive crawl has finished. Each URL is fetched at most once
    (:class:`VisitationLedger`), at most ``max_concurrency`` fetches run at the
    same time, and dead links are collected per referring page.
    """

    def __init__(
        self,
        seed_url: str,
        config: Optional[HunterConfig] = None,
        *,
        fetcher: Optional[Fetcher] = None,
        **options: Any,
    ) -> None:
        self.protocol, self.domain = extract_protocol_and_domain(seed_url)
        self.seed_url = normalize_url(seed_url)
        if config is None:
            config = HunterConfig.from_options(seed_url, **options)
        elif options or config.seed_url != seed_url:
            values = config.model_dump()
            values.update({k: v for k, v in options.items() if v is not None})
            values["seed_url"] = seed_url
            config = HunterConfig(**values)
        self.config = config
        self.fetcher = fetcher if fetcher is not None else create_fetcher(config)
        self.ledger = VisitationLedger()
        self.aggregator = DeadLinkAggregator()
        self.stats = CrawlStats()
        self.logger = logging.getLogger(LOGGER_NAME)
        self._permits = asyncio.Semaphore(config.max_concurrency)
        self._tasks: Optional[asyncio.TaskGroup] = None
        self._started = False

    @classmethod
    def from_config(cls, config: HunterConfig, *, fetcher: Optional[Fetcher] = None) -> Crawler:
        return cls(config.seed_url, config, fetcher=fetcher)

    async def hunt(self) -> DeadLinkReport:
        """Crawl from the seed until no task is left and return the dead links found."""
        if self._started:
            raise RuntimeError("a Crawler instance can only hunt once")
        self._started = True

        self.logger.info("Start hunting: %s (engine=%s)", self.seed_url, self.config.engine)
        start = time.monotonic()
        async with self.fetcher:
            async with asyncio.TaskGroup() as tasks:
                self._tasks = tasks
                tasks.create_task(self._follow(ROOT_REFERRER, self.seed_url, 0))
        self._tasks = None

        report = self.get_results()
        self.stats.elapsed = time.monotonic() - start
        self.stats.dead_links = report.total
        self.logger.info(
            "Finished: %d pages in %.2f s, %d dead links on %d pages, %d fetch failures",
            self.stats.pages_visited,
            self.stats.elapsed,
            report.total,
            len(report),
            self.stats.failures,
        )
        return report

    start_hunting = hunt

    def get_results(self) -> DeadLinkReport:
        return self.aggregator.snapshot()

    async def _follow(self, referrer: str, url: str, depth: int) -> None:
        """Resolve one edge ``referrer -> url`` and record it if *url* is dead."""
        try:
            is_dead = await self.ledger.visit_once(url, partial(self._visit, url, depth))
        except FetchError:
            # inconclusive; logged once by the task that ran the fetch
            return
        if is_dead:
            self.aggregator.record_dead_link(referrer, url)

    async def _visit(self, url: str, depth: int) -> bool:
        """Fetch *url* once, schedule its links, and report whether it is dead."""
        follow_links = not (self.fetcher.depth_limited and depth >= self.config.max_depth)
        async with self._permits:
            self.stats.fetches += 1
            try:
                result = await self.fetcher.probe(url, follow_links=follow_links)
            except FetchError as exc:
                self.stats.failures += 1
                self.logger.warning("Error fetching %s: %s", url, exc)
                raise
        self.stats.pages_visited += 1

        if result.is_dead:
            self.logger.debug("dead link %s (HTTP %d)", url, result.status)
            return True
        if follow_links:
            self._expand(url, result.hrefs, depth + 1)
        return False

    def _expand(self, page_url: str, hrefs: Iterable[str], depth: int) -> None:
        """Spawn one task per distinct in-scope link on *page_url*."""
        assert self._tasks is not None
        seen: set[str] = set()
        for href in hrefs:
            try:
                link = normalize_url(resolve_href(self.protocol, self.domain, href))
            except HrefRejected:
                continue
            if link in seen or not is_in_scope(self.domain, link):
                continue
            seen.add(link)
            if self.ledger.is_dead(link) is False:
                continue
            self._tasks.create_task(self._follow(page_url, link, depth))
