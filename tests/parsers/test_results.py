import pytest

from web_search_mcp.parsers.results import SEARCH_SURFACE_BASE_URL, clamp_limit, parse_search_results, resolve_result_url


def many_results_page(count: int) -> str:
    anchors = "\n".join(f'<div class="result"><a class="result__a" href="https://example.com/{i}">Result {i}</a></div>' for i in range(count))
    return f'<html><body><div id="links">{anchors}</div></body></html>'


def test_parse_two_results(search_results_page: str):
    results = parse_search_results(search_results_page, limit=5)

    assert len(results) == 2

    assert results[0].url == "https://example.com/a"
    assert results[0].title == "Result A"
    assert results[0].snippet == "The first result."

    assert results[1].url == "https://example.com/b"
    assert results[1].title == "Result B"
    assert results[1].snippet is None


@pytest.mark.parametrize(("limit", "expected"), [(-3, 1), (0, 1), (1, 1), (5, 5), (10, 10), (20, 10)])
def test_clamp_limit(limit: int, expected: int):
    assert clamp_limit(limit) == expected


def test_limit_zero_returns_one_result(search_results_page: str):
    results = parse_search_results(search_results_page, limit=0)

    assert [result.url for result in results] == ["https://example.com/a"]


def test_limit_is_capped_at_ten():
    results = parse_search_results(many_results_page(15), limit=20)

    assert len(results) == 10
    assert results[-1].url == "https://example.com/9"


def test_preserves_duplicates():
    page = many_results_page(1).replace("</div></body>", '<div class="result"><a class="result__a" href="https://example.com/0">Again</a></div></div></body>')

    results = parse_search_results(page, limit=5)

    assert [result.url for result in results] == ["https://example.com/0", "https://example.com/0"]


def test_skips_anchors_without_href():
    page = """
    <div id="links">
        <a class="result__a">No link</a>
        <a class="result__a" href="   ">Blank link</a>
        <a class="result__a" href="https://example.com/ok">Ok</a>
    </div>
    """

    results = parse_search_results(page, limit=5)

    assert [result.url for result in results] == ["https://example.com/ok"]


def test_resolves_relative_links():
    page = """
    <div id="links">
        <a class="result__a" href="/l/?uddg=https%3A%2F%2Fexample.com%2Frel">Redirect</a>
        <a class="result__a" href="/about">About</a>
    </div>
    """

    results = parse_search_results(page, limit=5)

    assert [result.url for result in results] == ["https://example.com/rel", "https://duckduckgo.com/about"]


def test_omits_empty_titles():
    results = parse_search_results('<div id="links"><a class="result__a" href="https://example.com/x">  </a></div>', limit=5)

    assert len(results) == 1
    assert results[0].title is None


def test_missing_container_returns_empty():
    assert parse_search_results('<html><body><a class="result__a" href="https://example.com">A</a></body></html>', limit=5) == []


@pytest.mark.parametrize("html", ["", "not html at all", "<html><body><div id='links'></div></body></html>"])
def test_unrecognized_markup_returns_empty(html: str):
    assert parse_search_results(html, limit=5) == []


def test_resolves_relative_redirect_targets():
    page = """
    <div id="links">
        <a class="result__a" href="//duckduckgo.com/l/?uddg=%2Frel">Relative target</a>
    </div>
    """

    results = parse_search_results(page, limit=5)

    assert [result.url for result in results] == ["https://duckduckgo.com/rel"]


def test_skips_non_http_links():
    page = """
    <div id="links">
        <a class="result__a" href="javascript:void(0)">Script</a>
        <a class="result__a" href="mailto:someone@example.com">Mail</a>
        <a class="result__a" href="//duckduckgo.com/l/?uddg=javascript%3Aalert(1)">Wrapped script</a>
        <a class="result__a" href="https://example.com/ok">Ok</a>
    </div>
    """

    results = parse_search_results(page, limit=5)

    assert [result.url for result in results] == ["https://example.com/ok"]


@pytest.mark.parametrize("href", ["http://[::1/broken", "//duckduckgo.com/l/?uddg=http%3A%2F%2F%5B%3A%3A1"])
def test_skips_unparseable_links(href: str):
    results = parse_search_results(f'<div id="links"><a class="result__a" href="{href}">Broken</a></div>', limit=5)

    assert results == []


@pytest.mark.parametrize(
    ("href", "expected"),
    [
        ("//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.com%2Fa", "https://example.com/a"),
        ("/l/?uddg=https%3A%2F%2Fexample.com%2Fa", "https://example.com/a"),
        ("//example.com/b", "https://example.com/b"),
        ("javascript:void(0)", None),
    ],
)
def test_resolve_result_url(href: str, expected: str | None):
    assert resolve_result_url(href, SEARCH_SURFACE_BASE_URL) == expected
