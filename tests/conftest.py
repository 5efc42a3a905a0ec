"""Shared test helpers."""
from typing import List

import pytest


class RecordingContext:
    """CallContext that keeps messages instead of logging them."""

    def __init__(self) -> None:
        self.infos: List[str] = []
        self.errors: List[str] = []

    async def info(self, message: str) -> None:
        self.infos.append(message)

    async def error(self, message: str) -> None:
        self.errors.append(message)


class FakeClock:
    """Manual monotonic clock; sleep() advances it instantly."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def ctx() -> RecordingContext:
    return RecordingContext()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def result_block(title: str, href: str, snippet: str = "") -> str:
    snippet_html = f'<a class="result__snippet" href="{href}">{snippet}</a>' if snippet else ""
    return (
        '<div class="result results_links web-result">'
        '<div class="links_main links_deep result__body">'
        f'<h2 class="result__title"><a rel="nofollow" class="result__a" href="{href}">{title}</a></h2>'
        f"{snippet_html}"
        "</div></div>"
    )


def results_page(*blocks: str) -> str:
    return f'<html><body><div id="links" class="results">{"".join(blocks)}</div></body></html>'
