# dead_link_hunter/crawler/browser.py
"""
Dynamic engine: pages are rendered by headless Chromium (Playwright) and the
anchors are read from the live DOM, so links inserted by client-side script
are found too.
"""
from __future__ import annotations

import asyncio
from typing import Any, List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeout
from playwright.async_api import async_playwright

from dead_link_hunter.config import HunterConfig
from dead_link_hunter.crawler.fetcher import Fetcher
from dead_link_hunter.crawler.models import FetchResult
from dead_link_hunter.errors import FetchNetworkError, FetchTimeout, RenderError
from dead_link_hunter.logger import logger

_HREFS_JS = "anchors => anchors.map(a => a.getAttribute('href'))"


class BrowserFetcher(Fetcher):
    """
    One shared browser process per hunt, one isolated context per page.

    ``browser`` and ``request_context`` may be supplied by the caller; the
    fetcher then uses them as-is and leaves their shutdown to the caller.
    """

    depth_limited = False

    def __init__(
        self,
        config: HunterConfig,
        *,
        browser: Any = None,
        request_context: Any = None,
        headless: bool = True,
    ) -> None:
        super().__init__(config)
        self.headless = headless
        self.browser = browser
        self.request_context = request_context
        self._owns_browser = browser is None
        self._owns_request = request_context is None
        self._playwright: Any = None
        self._launch_lock = asyncio.Lock()

    @property
    def _timeout_ms(self) -> float:
        return self.config.timeout * 1000

    async def open(self) -> None:
        async with self._launch_lock:
            if self.browser is not None and self.request_context is not None:
                return
            try:
                if self._playwright is None:
                    self._playwright = await async_playwright().start()
                if self.browser is None:
                    self.browser = await self._playwright.chromium.launch(headless=self.headless)
                if self.request_context is None:
                    self.request_context = await self._playwright.request.new_context(
                        user_agent=self.config.user_agent,
                        timeout=self._timeout_ms,
                    )
            except PlaywrightError as exc:
                await self.close()
                raise RenderError(self.config.seed_url, f"cannot start browser: {exc}") from exc
            logger.debug("Headless browser ready")

    async def close(self) -> None:
        if self._owns_request and self.request_context is not None:
            await self.request_context.dispose()
            self.request_context = None
        if self._owns_browser and self.browser is not None:
            await self.browser.close()
            self.browser = None
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None

    def _require_browser(self) -> Any:
        if self.browser is None:
            raise RuntimeError("Browser not started")
        return self.browser

    async def fetch(self, url: str, *, follow_links: bool = True) -> FetchResult:
        browser = self._require_browser()
        try:
            context = await browser.new_context(user_agent=self.config.user_agent)
        except PlaywrightError as exc:
            raise RenderError(url, f"cannot open browser context: {exc}") from exc

        logger.debug("fetching dynamic page %s", url)
        try:
            page = await context.new_page()
            response = await page.goto(url, timeout=self._timeout_ms)
            # goto() returns None for same-document navigations
            status = response.status if response is not None else 200
            if status > 299 or not follow_links:
                return FetchResult(url, status)
            values: List[Optional[str]] = await page.locator("a").evaluate_all(_HREFS_JS)
            return FetchResult(url, status, [v for v in values if v is not None])
        except PlaywrightTimeout as exc:
            raise FetchTimeout(url, f"navigation exceeded {self.config.timeout:g} s") from exc
        except PlaywrightError as exc:
            raise RenderError(url, exc) from exc
        finally:
            try:
                await context.close()
            except PlaywrightError as exc:
                logger.debug("Closing browser context for %s failed: %s", url, exc)

    async def head(self, url: str) -> FetchResult:
        if self.request_context is None:
            raise RuntimeError("Browser not started")
        try:
            response = await self.request_context.head(url, timeout=self._timeout_ms)
        except PlaywrightTimeout as exc:
            raise FetchTimeout(url, f"no response within {self.config.timeout:g} s") from exc
        except PlaywrightError as exc:
            raise FetchNetworkError(url, exc) from exc
        status = response.status
        try:
            await response.dispose()
        except PlaywrightError as exc:
            logger.debug("Disposing HEAD response for %s failed: %s", url, exc)
        return FetchResult(url, status)


__all__ = ["BrowserFetcher"]
