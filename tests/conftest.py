# File: tests/conftest.py
from typing import List

import pytest
import pytest_asyncio
from aiohttp import web

from dead_link_hunter.config import HunterConfig
from fakes import SEED, Site


@pytest.fixture()
def basic_config() -> HunterConfig:
    """A valid static-engine config for the example.test site."""
    return HunterConfig(seed_url=SEED, engine="static", max_depth=5, max_concurrency=20, timeout=2.0)


@pytest.fixture()
def example_site() -> Site:
    """
    Seed links to /about (live, links to /team) and /missing (404).
    """
    return {
        SEED: (200, ["/about", "/missing"]),
        "http://example.test/about": (200, ["/team"]),
        "http://example.test/team": (200, []),
    }


@pytest_asyncio.fixture
async def serve_app(unused_tcp_port_factory):
    """Start aiohttp apps on free ports; return their base URL; clean up afterwards."""
    runners: List[web.AppRunner] = []

    async def _start(app: web.Application) -> str:
        runner = web.AppRunner(app)
        await runner.setup()
        port = unused_tcp_port_factory()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        runners.append(runner)
        return f"http://127.0.0.1:{port}"

    yield _start

    for runner in runners:
        await runner.cleanup()
