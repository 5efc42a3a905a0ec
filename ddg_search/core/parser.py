"""
core/parser.py

DuckDuckGo HTML result page → ordered SearchResult list.

Parsing is best-effort: a block missing its title or link is skipped,
never an error.
"""
from __future__ import annotations

import urllib.parse
from typing import List

from bs4 import BeautifulSoup

from .config import SearchResult

REDIRECT_PREFIX = "//duckduckgo.com/l/?uddg="
AD_MARKER = "y.js"


def clean_redirect_link(link: str) -> str:
    """Unwrap a DuckDuckGo redirect link into its real destination."""
    if not link.startswith(REDIRECT_PREFIX):
        return link
    encoded = link.split("uddg=", 1)[1].split("&", 1)[0]
    return urllib.parse.unquote(encoded)


def parse_results(html: str, max_results: int = 10) -> List[SearchResult]:
    soup = BeautifulSoup(html, "html.parser")
    results: List[SearchResult] = []

    for block in soup.select(".result"):
        if len(results) >= max_results:
            break

        title_elem = block.select_one(".result__title")
        if title_elem is None:
            continue
        link_elem = title_elem.find("a")
        if link_elem is None:
            continue

        title = link_elem.get_text().strip()
        link = link_elem.get("href") or ""

        # Sponsored rows route through y.js
        if AD_MARKER in link:
            continue
        link = clean_redirect_link(link)

        snippet_elem = block.select_one(".result__snippet")
        snippet = snippet_elem.get_text().strip() if snippet_elem is not None else ""

        results.append(SearchResult(
            title=title,
            link=link,
            snippet=snippet,
            position=len(results) + 1,
        ))

    return results
