"""
tools/builtin.py

Wire the search and fetch_content tools into a fresh ToolRegistry.
"""
from __future__ import annotations

from typing import Optional

import httpx

from ..core.config import Settings
from ..core.fetcher import WebContentFetcher
from ..core.ratelimit import RateLimiter
from ..core.searcher import DuckDuckGoSearcher
from . import fetch, search
from .registry import ToolRegistry


def build_registry(
    searcher: DuckDuckGoSearcher,
    fetcher: WebContentFetcher,
    search_max_retries: int = 5,
    fetch_max_retries: int = 3,
) -> ToolRegistry:
    registry = ToolRegistry()
    registry.register(
        search.make_search_tool(searcher, search_max_retries),
        search.DESCRIPTION,
        search.INPUT_SCHEMA,
    )
    registry.register(
        fetch.make_fetch_tool(fetcher, fetch_max_retries),
        fetch.DESCRIPTION,
        fetch.INPUT_SCHEMA,
    )
    return registry


def build_default_registry(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ToolRegistry:
    """Registry with one searcher and one fetcher, each on its own limiter."""
    searcher = DuckDuckGoSearcher(
        rate_limiter=RateLimiter(settings.search_requests_per_minute),
        timeout=settings.request_timeout,
        transport=transport,
    )
    fetcher = WebContentFetcher(
        rate_limiter=RateLimiter(settings.fetch_requests_per_minute),
        timeout=settings.request_timeout,
        transport=transport,
    )
    return build_registry(
        searcher,
        fetcher,
        search_max_retries=settings.search_max_retries,
        fetch_max_retries=settings.fetch_max_retries,
    )
