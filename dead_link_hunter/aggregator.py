# File: dead_link_hunter/aggregator.py
"""dead_link_hunter.aggregator: dead links grouped by the page that references them."""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Tuple, TypedDict, Union

#: referrer key used when the seed URL itself is dead
ROOT_REFERRER = ""

@dataclass(frozen=True, slots=True)
class PageDeadLinks:
    """Dead links found on one page, in discovery order."""

    count: int
    dead_links: Tuple[str, ...]

# One exported record per referring page.
DeadLinkRecord = TypedDict(
    "DeadLinkRecord", {"Page": str, "Counts": int, "Dead Links": List[str]}
)

Row = Tuple[str, Union[int, str], str]

class DeadLinkReport(Mapping[str, PageDeadLinks]):
    """Read-only result of a hunt: referrer URL -> :class:`PageDeadLinks`."""

    __slots__ = ("_pages",)

    def __init__(self, pages: Mapping[str, PageDeadLinks] | None = None) -> None:
        self._pages = MappingProxyType(dict(pages or {}))

    def __getitem__(self, referrer: str) -> PageDeadLinks:
        return self._pages[referrer]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __repr__(self) -> str:
        return f"DeadLinkReport({dict(self._pages)!r})"

    @property
    def total(self) -> int:
        """Number of (referrer, dead link) edges."""
        return sum(page.count for page in self._pages.values())

    def rows(self) -> Iterator[Row]:
        """Grouped table rows: page and count only on each referrer's first row."""
        for referrer, page in self._pages.items():
            for i, dead_link in enumerate(page.dead_links):
                if i == 0:
                    yield referrer, page.count, dead_link
                else:
                    yield "", "", dead_link

    def records(self) -> List[DeadLinkRecord]:
        """One ``{"Page", "Counts", "Dead Links"}`` record per referrer."""
        return [
            {"Page": referrer, "Counts": page.count, "Dead Links": list(page.dead_links)}
            for referrer, page in self._pages.items()
        ]

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {
            referrer: {"count": page.count, "dead_links": list(page.dead_links)}
            for referrer, page in self._pages.items()
        }

class DeadLinkAggregator:
    """Collects dead-link edges from concurrent crawl tasks."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counts: Dict[str, int] = {}
        self._links: Dict[str, List[str]] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._links)

    def record_dead_link(self, referrer: str, dead_url: str) -> None:
        """Append *dead_url* to *referrer*'s entry, creating it on first touch."""
        with self._lock:
            if referrer not in self._links:
                self._counts[referrer] = 0
                self._links[referrer] = []
            self._counts[referrer] += 1
            self._links[referrer].append(dead_url)

    def snapshot(self) -> DeadLinkReport:
        with self._lock:
            return DeadLinkReport(
                {
                    referrer: PageDeadLinks(self._counts[referrer], tuple(links))
                    for referrer, links in self._links.items()
                }
            )

__all__ = [
    "ROOT_REFERRER",
    "PageDeadLinks",
    "DeadLinkRecord",
    "DeadLinkReport",
    "DeadLinkAggregator",
    "Row",
]
