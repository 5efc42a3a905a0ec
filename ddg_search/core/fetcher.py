"""
core/fetcher.py

Web page fetcher for the fetch_content tool:
  - shared rate limiter (20 requests/minute by default)
  - user-agent rotation per attempt
  - up to 5 redirects, 30 s timeout
  - plain text output, truncated at 8000 chars (never raises)
"""
from __future__ import annotations

from typing import Optional

import httpx

from .context import CallContext
from .extractor import extract_page_text, truncate_text
from .http import DEFAULT_TIMEOUT, UserAgentProvider, build_http_client, get_random_user_agent
from .ratelimit import RateLimiter
from .retry import AttemptOutcome, run_with_retries


def exhausted_message(url: str, attempts: int) -> str:
    return f"Error: Failed to fetch content from {url} after {attempts} attempts."


class WebContentFetcher:
    def __init__(
        self,
        rate_limiter: Optional[RateLimiter] = None,
        user_agent: UserAgentProvider = get_random_user_agent,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.rate_limiter = rate_limiter or RateLimiter(requests_per_minute=20)
        self._user_agent = user_agent
        self._timeout = timeout
        self._transport = transport

    async def _attempt(self, url: str, ctx: CallContext) -> AttemptOutcome[str]:
        await self.rate_limiter.acquire()
        await ctx.info(f"Fetching content from: {url}")

        async with build_http_client(self._timeout, self._transport, follow_redirects=True) as client:
            resp = await client.get(url, headers={"User-Agent": self._user_agent()})
            resp.raise_for_status()

        text = extract_page_text(resp.text)
        if not text:
            return AttemptOutcome.empty("no readable content")
        return AttemptOutcome.success(truncate_text(text))

    async def fetch_and_parse(self, url: str, ctx: CallContext, max_retries: int = 3) -> str:
        text = await run_with_retries(
            lambda: self._attempt(url, ctx),
            max_retries,
            ctx,
            label=f"fetch {url}",
        )
        if text is None:
            return exhausted_message(url, max_retries)
        await ctx.info(f"Successfully fetched and parsed content ({len(text)} characters)")
        return text
