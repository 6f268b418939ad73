# dead_link_hunter/crawler/models.py
"""
Data models for the Dead Link Hunter crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class FetchResult:
    """Outcome of one page load or HEAD probe: status code and raw href values."""

    url: str
    status: int
    hrefs: List[str] = field(default_factory=list)

    @property
    def is_dead(self) -> bool:
        return self.status > 299


@dataclass(slots=True)
class CrawlStats:
    """Counters collected during a hunt for the summary log line."""

    pages_visited: int = 0
    fetches: int = 0
    failures: int = 0
    dead_links: int = 0
    elapsed: float = 0.0
