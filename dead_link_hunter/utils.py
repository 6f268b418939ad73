# File: dead_link_hunter/utils.py
"""dead_link_hunter.utils: URL scoping helpers used by the crawler."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Optional, Sequence, Tuple
from urllib.parse import urlsplit, urlunsplit

from dead_link_hunter.errors import HrefRejected, InvalidSeedURL
from dead_link_hunter.logger import logger

__all__: Sequence[str] = (
    "BINARY_EXTENSIONS",
    "extract_protocol_and_domain",
    "get_domain",
    "is_in_scope",
    "resolve_href",
    "normalize_url",
    "is_binary_url",
)

_WEB_SCHEMES = ("http", "https")

# Resources that are probed with HEAD and never parsed for links.
BINARY_EXTENSIONS: frozenset[str] = frozenset((
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx", ".odt", ".ods",
    ".zip", ".rar", ".7z", ".tar", ".gz", ".tgz", ".bz2", ".xz",
    ".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg", ".bmp", ".ico", ".tif", ".tiff",
    ".mp3", ".wav", ".ogg", ".flac", ".m4a",
    ".mp4", ".webm", ".avi", ".mov", ".mkv",
    ".woff", ".woff2", ".ttf", ".otf", ".eot",
    ".exe", ".msi", ".dmg", ".apk", ".iso", ".bin",
))


def _split_host(url: str) -> Optional[Tuple[str, str]]:
    """Return ``(scheme, host[:port])`` with the ``www.`` label removed, or None."""
    try:
        parsed = urlsplit(url.strip())
        port = parsed.port
    except ValueError:
        return None
    scheme = parsed.scheme.lower()
    host = parsed.hostname
    if scheme not in _WEB_SCHEMES or not host:
        return None
    host = host.removeprefix("www.")
    if not host:
        return None
    return scheme, f"{host}:{port}" if port is not None else host


def extract_protocol_and_domain(seed_url: str) -> Tuple[str, str]:
    """Split the seed into protocol and comparable domain.

    Raises :class:`InvalidSeedURL` when either part is missing.
    """
    parts = _split_host(seed_url)
    if parts is None:
        raise InvalidSeedURL(seed_url, "expected an absolute http(s) URL with a host")
    return parts


def get_domain(url: str) -> Optional[str]:
    """Comparable domain of *url* (lower-case, no ``www.``), None if unparseable."""
    parts = _split_host(url)
    return parts[1] if parts else None


def is_in_scope(domain: str, candidate_url: str) -> bool:
    """True iff *candidate_url* lives on exactly *domain* (subdomains excluded)."""
    return get_domain(candidate_url) == domain


def resolve_href(protocol: str, domain: str, href: str) -> str:
    """Turn a raw ``href`` value into an absolute URL.

    Root-relative paths are anchored at ``protocol://domain``; absolute
    http(s) links pass through. Everything else, including URLs that
    ``urlsplit`` cannot parse, raises :class:`HrefRejected`.
    """
    value = href.strip()
    if not value:
        raise HrefRejected(href, "empty")
    if value.startswith("#"):
        raise HrefRejected(href, "fragment")
    if value.startswith("//"):
        resolved = f"{protocol}:{value}"
    elif value.startswith("/"):
        resolved = f"{protocol}://{domain}{value}"
    elif value.lower().startswith(("http://", "https://")):
        resolved = value
    else:
        raise HrefRejected(href, "unrecognized")
    try:
        urlsplit(resolved).port
    except ValueError as exc:
        raise HrefRejected(href, "unrecognized") from exc
    return resolved


def normalize_url(url: str) -> str:
    """Identity of a crawl target: no fragment, lower-case scheme and host, ``/`` for empty path."""
    parsed = urlsplit(url.strip())
    normalized = urlunsplit(
        (parsed.scheme.lower(), parsed.netloc.lower(), parsed.path or "/", parsed.query, "")
    )
    if normalized != url:
        logger.debug("Normalized URL: %s -> %s", url, normalized)
    return normalized


def is_binary_url(url: str) -> bool:
    """True when the path extension points at a non-HTML resource."""
    path = urlsplit(url).path
    return PurePosixPath(path).suffix.lower() in BINARY_EXTENSIONS
