"""Tests for core/parser.py"""
import pytest
from conftest import result_block, results_page

from ddg_search.core.parser import clean_redirect_link, parse_results

REDIRECT = "//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.com%2Fpage&amp;rut=xyz"
AD = "https://duckduckgo.com/y.js?ad_domain=shop.example&amp;ad_provider=bing"


def test_clean_redirect_link():
    link = "//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.com%2Fpage&rut=xyz"
    assert clean_redirect_link(link) == "https://example.com/page"


def test_clean_redirect_link_without_trailing_params():
    link = "//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.com%2Fa%3Fb%3D1"
    assert clean_redirect_link(link) == "https://example.com/a?b=1"


def test_plain_link_untouched():
    assert clean_redirect_link("https://example.com/x") == "https://example.com/x"


def test_parses_redirect_into_destination():
    html = results_page(result_block("Example Page", REDIRECT, "An example snippet."))
    results = parse_results(html)
    assert len(results) == 1
    r = results[0]
    assert r.title == "Example Page"
    assert r.link == "https://example.com/page"
    assert r.snippet == "An example snippet."
    assert r.position == 1


def test_missing_snippet_is_empty_string():
    html = results_page(result_block("No Snippet", "https://example.com/"))
    assert parse_results(html)[0].snippet == ""


def test_ads_skipped_without_consuming_position():
    html = results_page(
        result_block("Sponsored", AD, "Buy now"),
        result_block("First", "https://a.example/", "a"),
        result_block("Sponsored again", AD, "Buy more"),
        result_block("Second", "https://b.example/", "b"),
    )
    results = parse_results(html)
    assert [r.title for r in results] == ["First", "Second"]
    assert [r.position for r in results] == [1, 2]
    assert all("y.js" not in r.link for r in results)


def test_blocks_without_title_or_link_skipped():
    html = results_page(
        '<div class="result"><a class="result__snippet">orphan snippet</a></div>',
        '<div class="result"><h2 class="result__title">no anchor</h2></div>',
        result_block("Kept", "https://kept.example/", "kept"),
    )
    results = parse_results(html)
    assert len(results) == 1
    assert results[0].title == "Kept"
    assert results[0].position == 1


def test_positions_contiguous_and_in_document_order():
    blocks = []
    for i in range(8):
        if i % 3 == 0:
            blocks.append(result_block(f"ad {i}", AD))
        blocks.append(result_block(f"Result {i}", f"https://site{i}.example/"))
    results = parse_results(results_page(*blocks), max_results=20)
    assert [r.position for r in results] == list(range(1, len(results) + 1))
    assert [r.title for r in results] == [f"Result {i}" for i in range(8)]


@pytest.mark.parametrize("limit", [1, 3])
def test_stops_at_max_results(limit):
    blocks = [result_block(f"R{i}", f"https://r{i}.example/") for i in range(5)]
    results = parse_results(results_page(*blocks), max_results=limit)
    assert len(results) == limit
    assert results[-1].position == limit


def test_garbage_html_returns_empty():
    assert parse_results("<html><body><p>nothing here") == []
    assert parse_results("") == []
