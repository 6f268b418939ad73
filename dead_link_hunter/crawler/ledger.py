# dead_link_hunter/crawler/ledger.py
"""
Visitation ledger: exactly one fetch per URL, concurrent callers coalesced.

Every URL maps to an :class:`asyncio.Future` holding its outcome. The first
caller creates the future and runs the fetch; callers arriving while it is
running await the same future; later callers read the stored outcome. The
lookup and the insert happen without an ``await`` in between, so on the
event loop they are a single atomic step.
"""
from __future__ import annotations

import asyncio
import enum
from typing import Awaitable, Callable, Dict, Optional

from dead_link_hunter.logger import logger

FetchFn = Callable[[], Awaitable[bool]]


class VisitState(enum.Enum):
    UNVISITED = "unvisited"
    IN_FLIGHT = "in-flight"
    VISITED = "visited"


class VisitationLedger:
    """Concurrency-safe record of dispatched URLs and their liveness."""

    def __init__(self) -> None:
        self._cells: Dict[str, asyncio.Future[bool]] = {}
        #: number of times a fetch function was actually executed
        self.fetch_count = 0

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, url: object) -> bool:
        return url in self._cells

    def state(self, url: str) -> VisitState:
        cell = self._cells.get(url)
        if cell is None:
            return VisitState.UNVISITED
        return VisitState.VISITED if cell.done() else VisitState.IN_FLIGHT

    def is_dead(self, url: str) -> Optional[bool]:
        """Stored liveness of a visited URL; None if unvisited, in flight or inconclusive."""
        cell = self._cells.get(url)
        if cell is None or not cell.done() or cell.cancelled() or cell.exception() is not None:
            return None
        return cell.result()

    async def visit_once(self, url: str, fetch_fn: FetchFn) -> bool:
        """
        Return whether *url* is dead, running *fetch_fn* at most once per URL.

        If the fetch raised, that same exception is raised to every caller,
        now and later; a failed URL is never fetched again.
        """
        cell = self._cells.get(url)
        if cell is not None:
            if not cell.done():
                logger.debug("waiting for in-flight fetch of %s", url)
                # shield: a cancelled waiter must not cancel the shared result
                return await asyncio.shield(cell)
            return cell.result()

        cell = asyncio.get_running_loop().create_future()
        self._cells[url] = cell
        self.fetch_count += 1
        try:
            is_dead = await fetch_fn()
        except asyncio.CancelledError:
            cell.cancel()
            raise
        except Exception as exc:
            cell.set_exception(exc)
            cell.exception()  # marks the exception as retrieved
            raise
        cell.set_result(is_dead)
        return is_dead


__all__ = ["FetchFn", "VisitState", "VisitationLedger"]
