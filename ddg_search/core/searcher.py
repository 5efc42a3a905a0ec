"""
core/searcher.py

DuckDuckGo HTML search: rate limit → POST → parse, retried until a
non-empty page of results comes back or attempts run out.
"""
from __future__ import annotations

from typing import List, Optional

import httpx

from .config import SearchResult
from .context import CallContext
from .formatters import format_results_for_llm
from .http import DEFAULT_TIMEOUT, UserAgentProvider, build_http_client, get_random_user_agent
from .parser import parse_results
from .ratelimit import RateLimiter
from .retry import AttemptOutcome, run_with_retries


class DuckDuckGoSearcher:
    BASE_URL = "https://html.duckduckgo.com/html"

    format_results_for_llm = staticmethod(format_results_for_llm)

    def __init__(
        self,
        rate_limiter: Optional[RateLimiter] = None,
        user_agent: UserAgentProvider = get_random_user_agent,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.rate_limiter = rate_limiter or RateLimiter(requests_per_minute=30)
        self._user_agent = user_agent
        self._timeout = timeout
        self._transport = transport

    async def _attempt(
        self, query: str, ctx: CallContext, max_results: int,
    ) -> AttemptOutcome[List[SearchResult]]:
        await self.rate_limiter.acquire()
        await ctx.info(f"Searching DuckDuckGo for: {query}")

        async with build_http_client(self._timeout, self._transport, follow_redirects=True) as client:
            resp = await client.post(
                self.BASE_URL,
                data={"q": query, "b": "", "kl": ""},
                headers={"User-Agent": self._user_agent()},
            )
            resp.raise_for_status()

        results = parse_results(resp.text, max_results)
        if not results:
            return AttemptOutcome.empty("no results")
        return AttemptOutcome.success(results)

    async def search(
        self,
        query: str,
        ctx: CallContext,
        max_results: int = 10,
        max_retries: int = 5,
    ) -> List[SearchResult]:
        """
        Return up to *max_results* results for *query*.

        An empty list after *max_retries* attempts is a normal outcome
        (bot detection or no matches), not an error.
        """
        results = await run_with_retries(
            lambda: self._attempt(query, ctx, max_results),
            max_retries,
            ctx,
            label="search",
        )
        if results is None:
            return []
        await ctx.info(f"Successfully found {len(results)} results")
        return results
