"""
core/formatters.py

Output formatters: LLM-readable text digest and JSON-ready dicts.
"""
from __future__ import annotations

from typing import List, Sequence

from .config import SearchResult

NO_RESULTS_MESSAGE = (
    "No results were found for your search query. This could be due to "
    "DuckDuckGo's bot detection or the query returned no matches. "
    "Please try rephrasing your search or try again in a few minutes."
)


def format_results_for_llm(results: Sequence[SearchResult]) -> str:
    if not results:
        return NO_RESULTS_MESSAGE

    output: List[str] = [f"Found {len(results)} search results:\n"]
    for r in results:
        output.append(f"{r.position}. {r.title}")
        output.append(f"   URL: {r.link}")
        output.append(f"   Summary: {r.snippet}")
        output.append("")
    return "\n".join(output)


def format_results_json(results: Sequence[SearchResult]) -> List[dict]:
    """Return the raw result array served by POST /search."""
    return [r.to_dict() for r in results]
