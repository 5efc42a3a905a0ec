"""
core/http.py

Outbound HTTP plumbing shared by the searcher and the fetcher:
  - user-agent providers (random rotation by default, fixed cycle for tests)
  - httpx.AsyncClient factory with an injectable transport
"""
from __future__ import annotations

import itertools
import random
from typing import Callable, Iterable, Optional, Tuple

import httpx

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_TIMEOUT = 30.0
MAX_REDIRECTS = 5

USER_AGENTS: Tuple[str, ...] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Chrome/122.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 Chrome/122.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:123.0) Gecko/20100101 Firefox/123.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 Safari/605.1.15",
)

UserAgentProvider = Callable[[], str]


# ---------------------------------------------------------------------------
# User agents
# ---------------------------------------------------------------------------

def get_random_user_agent() -> str:
    return random.choice(USER_AGENTS)


def cycle_user_agents(agents: Iterable[str]) -> UserAgentProvider:
    """Return a provider that yields *agents* in order, wrapping around."""
    it = itertools.cycle(tuple(agents))
    return lambda: next(it)


# ---------------------------------------------------------------------------
# Client factory
# ---------------------------------------------------------------------------

def build_http_client(
    timeout: float = DEFAULT_TIMEOUT,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    follow_redirects: bool = False,
) -> httpx.AsyncClient:
    """
    Build an httpx.AsyncClient for a single attempt.

    Use as an async context manager:
        async with build_http_client(...) as client:
            ...
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=follow_redirects,
        max_redirects=MAX_REDIRECTS,
        transport=transport,
    )
