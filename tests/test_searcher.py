"""Tests for core/searcher.py"""
import urllib.parse

import httpx
import pytest
from conftest import result_block, results_page

from ddg_search.core.http import cycle_user_agents
from ddg_search.core.ratelimit import RateLimiter
from ddg_search.core.searcher import DuckDuckGoSearcher

PAGE = results_page(
    result_block("Python", "//duckduckgo.com/l/?uddg=https%3A%2F%2Fpython.org%2F&amp;rut=abc", "Official site"),
    result_block("Docs", "https://docs.python.org/3/", "Documentation"),
)
EMPTY_PAGE = results_page()


def make_searcher(handler, clock=None, agents=("UA-1", "UA-2")):
    limiter = RateLimiter(requests_per_minute=1000)
    if clock is not None:
        limiter = RateLimiter(requests_per_minute=1000, clock=clock, sleep=clock.sleep)
    return DuckDuckGoSearcher(
        rate_limiter=limiter,
        user_agent=cycle_user_agents(agents),
        transport=httpx.MockTransport(handler),
    )


def recorder(*responses):
    """Handler replaying *responses*: (status, body) pairs or exceptions; the last one repeats."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        item = responses[min(len(requests), len(responses)) - 1]
        if isinstance(item, Exception):
            raise item
        status, body = item
        return httpx.Response(status, text=body)

    return handler, requests


@pytest.mark.asyncio
async def test_search_posts_form_and_parses(ctx):
    handler, requests = recorder((200, PAGE))
    searcher = make_searcher(handler)

    results = await searcher.search("python tips", ctx)

    assert [r.link for r in results] == ["https://python.org/", "https://docs.python.org/3/"]
    assert [r.position for r in results] == [1, 2]
    assert len(requests) == 1
    req = requests[0]
    assert req.method == "POST"
    assert str(req.url) == "https://html.duckduckgo.com/html"
    assert req.headers["User-Agent"] == "UA-1"
    form = urllib.parse.parse_qs(req.content.decode(), keep_blank_values=True)
    assert form == {"q": ["python tips"], "b": [""], "kl": [""]}
    assert ctx.infos[-1] == "Successfully found 2 results"


@pytest.mark.asyncio
async def test_empty_page_is_retried(ctx):
    handler, requests = recorder(
        (200, EMPTY_PAGE),
        (200, PAGE),
    )
    searcher = make_searcher(handler)

    results = await searcher.search("python", ctx)

    assert len(results) == 2
    assert len(requests) == 2
    assert [r.headers["User-Agent"] for r in requests] == ["UA-1", "UA-2"]


@pytest.mark.asyncio
async def test_http_error_then_success(ctx):
    handler, requests = recorder(
        (503, "busy"),
        (200, PAGE),
    )
    results = await make_searcher(handler).search("python", ctx)
    assert len(results) == 2
    assert "HTTP error 503" in ctx.errors[0]


@pytest.mark.asyncio
async def test_exhaustion_returns_empty_list(ctx):
    handler, requests = recorder((200, EMPTY_PAGE))
    results = await make_searcher(handler).search("nothing", ctx, max_retries=4)
    assert results == []
    assert len(requests) == 4


@pytest.mark.asyncio
async def test_timeouts_never_raise(ctx):
    request = httpx.Request("POST", DuckDuckGoSearcher.BASE_URL)
    handler, requests = recorder(httpx.ReadTimeout("timed out", request=request))
    results = await make_searcher(handler).search("slow", ctx, max_retries=2)
    assert results == []
    assert len(requests) == 2
    assert ctx.errors[0] == "search: attempt 1/2 failed: request timed out"


@pytest.mark.asyncio
async def test_max_results_respected(ctx):
    page = results_page(*[result_block(f"R{i}", f"https://r{i}.example/") for i in range(15)])
    handler, _ = recorder((200, page))
    results = await make_searcher(handler).search("many", ctx, max_results=10)
    assert len(results) == 10


@pytest.mark.asyncio
async def test_every_attempt_acquires_rate_limit(ctx, clock):
    handler, requests = recorder((200, EMPTY_PAGE))
    searcher = make_searcher(handler, clock=clock)
    await searcher.search("x", ctx, max_retries=3)
    assert searcher.rate_limiter.pending == 3


@pytest.mark.asyncio
async def test_search_follows_endpoint_redirect(ctx):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/html":
            return httpx.Response(302, headers={"Location": "https://html.duckduckgo.com/html/"})
        return httpx.Response(200, text=PAGE)

    results = await make_searcher(handler).search("python", ctx, max_retries=1)
    assert [r.position for r in results] == [1, 2]
    assert ctx.errors == []
