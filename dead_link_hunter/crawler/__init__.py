"""Crawl engine: scheduler, visitation ledger and page fetchers."""
from dead_link_hunter.crawler.crawler import Crawler, create_fetcher
from dead_link_hunter.crawler.fetcher import Fetcher, StaticFetcher
from dead_link_hunter.crawler.ledger import VisitationLedger, VisitState
from dead_link_hunter.crawler.models import CrawlStats, FetchResult

__all__ = [
    "Crawler",
    "CrawlStats",
    "create_fetcher",
    "Fetcher",
    "FetchResult",
    "StaticFetcher",
    "VisitationLedger",
    "VisitState",
]
