"""
tools/fetch.py

Tool: fetch_content

Fetch a single URL and return its visible text, or an "Error: ..." string.
"""
from __future__ import annotations

from ..core.context import CallContext
from ..core.fetcher import WebContentFetcher
from .registry import ToolHandler

DESCRIPTION = "Fetch and parse content from a webpage URL"

INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "url": {
            "type": "string",
            "description": "The URL to fetch",
        },
    },
    "required": ["url"],
}


def make_fetch_tool(fetcher: WebContentFetcher, max_retries: int = 3) -> ToolHandler:
    async def fetch_content(url: str, ctx: CallContext) -> str:
        return await fetcher.fetch_and_parse(url, ctx, max_retries)

    return fetch_content
