"""
Dead Link Hunter package initializer.
Defines package version and exposes the crawler and CLI.
"""
__version__ = "0.1.0"

from dead_link_hunter.aggregator import DeadLinkReport, PageDeadLinks
from dead_link_hunter.config import HunterConfig, load_config
from dead_link_hunter.crawler import Crawler

# Expose CLI entry point
from .cli import cli

__all__ = [
    "__version__",
    "cli",
    "Crawler",
    "DeadLinkReport",
    "HunterConfig",
    "load_config",
    "PageDeadLinks",
]
