"""
tools/search.py

Tool: search

DuckDuckGo search returning SearchResult objects.  Front ends decide how
to render them (raw JSON array over HTTP, text digest over MCP).
"""
from __future__ import annotations

import logging
from typing import List, Union

from ..core.config import SearchResult
from ..core.context import CallContext
from ..core.searcher import DuckDuckGoSearcher
from .registry import ToolHandler

logger = logging.getLogger(__name__)

DESCRIPTION = "Search DuckDuckGo and return formatted results"

INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "query": {
            "type": "string",
            "description": "Search query",
        },
        "max_results": {
            "type": "integer",
            "description": "Max results to return (default 10)",
            "default": 10,
        },
    },
    "required": ["query"],
}


def make_search_tool(searcher: DuckDuckGoSearcher, max_retries: int = 5) -> ToolHandler:
    async def search(
        query: str, ctx: CallContext, max_results: int = 10,
    ) -> Union[List[SearchResult], str]:
        try:
            return await searcher.search(query, ctx, max_results, max_retries)
        except Exception as exc:
            logger.exception("search tool raised for %r", query)
            return f"An error occurred while searching: {exc}"

    return search
