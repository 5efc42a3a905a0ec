"""
core/extractor.py

HTML → flat readable text for the fetch tool.
"""
from __future__ import annotations

import re

from bs4 import BeautifulSoup

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

NOISE_SELECTOR = "script, style, nav, header, footer"
MAX_CONTENT_CHARS = 8000
TRUNCATION_MARKER = "... [content truncated]"

RE_WHITESPACE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def clean_text(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    if not text:
        return ""
    return RE_WHITESPACE.sub(" ", text).strip()


def truncate_text(text: str, max_length: int = MAX_CONTENT_CHARS) -> str:
    if len(text) > max_length:
        return text[:max_length] + TRUNCATION_MARKER
    return text


def extract_page_text(html: str) -> str:
    """
    Extract the body text of an HTML page.

    script, style, nav, header and footer elements are dropped first.
    Documents without a <body> fall back to the whole tree.
    """
    soup = BeautifulSoup(html, "html.parser")
    for node in soup.select(NOISE_SELECTOR):
        node.decompose()

    root = soup.body if soup.body is not None else soup
    return clean_text(root.get_text())
