# dead_link_hunter/crawler/fetcher.py
"""
Fetcher module: the page-loading capability shared by both engines, and the
static engine (aiohttp GET + BeautifulSoup).
"""
from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from dead_link_hunter.config import HunterConfig
from dead_link_hunter.crawler.link_extractor import extract_hrefs
from dead_link_hunter.crawler.models import FetchResult
from dead_link_hunter.errors import FetchNetworkError, FetchTimeout
from dead_link_hunter.logger import logger
from dead_link_hunter.utils import is_binary_url


class Fetcher(ABC):
    """
    Loads one URL and reports its status code plus the raw hrefs on it.

    Implementations raise :class:`~dead_link_hunter.errors.FetchError`
    subclasses for anything that prevents a status code from being read.
    """

    #: whether the crawler applies ``max_depth`` to this engine
    depth_limited: ClassVar[bool] = True

    def __init__(self, config: HunterConfig) -> None:
        self.config = config

    async def __aenter__(self) -> Fetcher:
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def open(self) -> None:
        """Acquire network resources. Idempotent."""

    async def close(self) -> None:
        """Release network resources. Idempotent."""

    @abstractmethod
    async def fetch(self, url: str, *, follow_links: bool = True) -> FetchResult:
        """Load *url*; collect hrefs only when *follow_links* and the page is live."""

    @abstractmethod
    async def head(self, url: str) -> FetchResult:
        """Liveness-only probe; the result never carries hrefs."""

    async def probe(self, url: str, *, follow_links: bool = True) -> FetchResult:
        """HEAD for binary resources, full fetch for everything else."""
        if is_binary_url(url):
            logger.debug("fetching binary file %s", url)
            return await self.head(url)
        return await self.fetch(url, follow_links=follow_links)


class StaticFetcher(Fetcher):
    """Plain HTTP engine: GET with a bounded timeout, anchors parsed from the body."""

    depth_limited = True

    def __init__(self, config: HunterConfig, session: Optional[ClientSession] = None) -> None:
        super().__init__(config)
        self.session = session
        self._owns_session = session is None

    async def open(self) -> None:
        if self.session is None or self.session.closed:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
            self._owns_session = True

    async def close(self) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    def _require_session(self) -> ClientSession:
        if not self.session:
            raise RuntimeError("Session not initialized")
        return self.session

    async def fetch(self, url: str, *, follow_links: bool = True) -> FetchResult:
        session = self._require_session()
        logger.debug("fetching page %s", url)
        try:
            async with session.get(url) as resp:
                status = resp.status
                if status > 299 or not follow_links:
                    return FetchResult(url, status)
                mime = resp.headers.get("Content-Type", "").split(";", 1)[0].strip().lower()
                if mime and "html" not in mime:
                    return FetchResult(url, status)
                body = await resp.read()
        except asyncio.TimeoutError as exc:
            raise FetchTimeout(url, f"no response within {self.config.timeout:g} s") from exc
        except ClientError as exc:
            raise FetchNetworkError(url, exc) from exc
        return FetchResult(url, status, extract_hrefs(body))

    async def head(self, url: str) -> FetchResult:
        session = self._require_session()
        try:
            async with session.head(url, allow_redirects=True) as resp:
                return FetchResult(url, resp.status)
        except asyncio.TimeoutError as exc:
            raise FetchTimeout(url, f"no response within {self.config.timeout:g} s") from exc
        except ClientError as exc:
            raise FetchNetworkError(url, exc) from exc


__all__ = ["Fetcher", "StaticFetcher"]
