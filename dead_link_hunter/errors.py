"""Exception hierarchy for Dead Link Hunter."""
from __future__ import annotations

__all__ = (
    "HunterError",
    "InvalidSeedURL",
    "HrefRejected",
    "FetchError",
    "FetchNetworkError",
    "FetchTimeout",
    "RenderError",
)


class HunterError(Exception):
    """Base class for every error raised by the package."""


class InvalidSeedURL(HunterError, ValueError):
    """The seed URL has no usable protocol or domain; the hunt cannot start."""

    def __init__(self, url: str, detail: str = "") -> None:
        self.url = url
        message = f"invalid seed URL {url!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class HrefRejected(HunterError, ValueError):
    """An href value that does not resolve to a crawlable URL."""

    def __init__(self, href: str, reason: str) -> None:
        self.href = href
        self.reason = reason
        super().__init__(f"href {href!r} rejected ({reason})")


class FetchError(HunterError):
    """A single URL could not be evaluated. Never fatal for the hunt."""

    def __init__(self, url: str, detail: object = "") -> None:
        self.url = url
        self.detail = detail
        super().__init__(f"{url}: {detail}" if detail != "" else url)


class FetchNetworkError(FetchError):
    """Connection, DNS or protocol failure."""


class FetchTimeout(FetchError):
    """The fetch did not finish within the configured timeout."""


class RenderError(FetchError):
    """The headless browser failed to open a context or navigate."""
