# === FILE: dead_link_hunter/hunter.py ===
"""
Thin wrapper that runs one hunt for a configuration.
"""
from dead_link_hunter.aggregator import DeadLinkReport
from dead_link_hunter.config import HunterConfig
from dead_link_hunter.crawler.crawler import Crawler


async def start_hunt(cfg: HunterConfig) -> DeadLinkReport:
    """
    Crawl ``cfg.seed_url`` with the configured engine and return the dead links.

    Parameters
    ----------
    cfg : HunterConfig
        Hunt configuration.

    Returns
    -------
    DeadLinkReport
        Referrer URL -> dead links found on that page.
    """
    crawler = Crawler.from_config(cfg)
    return await crawler.hunt()

__all__ = ["start_hunt"]
