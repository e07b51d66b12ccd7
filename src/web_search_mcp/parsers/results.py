from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup, Tag

from web_search_mcp.models.search import SearchResult
from web_search_mcp.parsers.links import normalize_link

SEARCH_SURFACE_BASE_URL = "https://duckduckgo.com/"

RESULT_LINK_SELECTOR = "#links .result__a"
RESULT_CONTAINER_CLASS = "result"
RESULT_SNIPPET_SELECTOR = ".result__snippet"

ALLOWED_SCHEMES = {"http", "https"}

MIN_RESULTS = 1
MAX_RESULTS = 10


def clamp_limit(limit: int) -> int:
    return max(MIN_RESULTS, min(limit, MAX_RESULTS))


def resolve_result_url(href: str, base_url: str) -> str | None:
    """Resolve a result href to an absolute http(s) URL, unwrapping redirect links.

    Returns None for hrefs that cannot be made into one, such as `javascript:` links.
    """
    try:
        # redirect targets may themselves be relative
        url = urljoin(base_url, normalize_link(urljoin(base_url, href)))
        scheme = urlsplit(url).scheme
    except ValueError:
        return None

    return url if scheme in ALLOWED_SCHEMES else None


def _text_or_none(tag: Tag | None) -> str | None:
    if tag is None:
        return None

    return tag.get_text(" ", strip=True) or None


def _snippet_for(anchor: Tag) -> str | None:
    container = anchor.find_parent(class_=RESULT_CONTAINER_CLASS)
    if container is None:
        return None

    return _text_or_none(container.select_one(RESULT_SNIPPET_SELECTOR))


def parse_search_results(html: str, limit: int, base_url: str = SEARCH_SURFACE_BASE_URL) -> list[SearchResult]:
    """Parse a DuckDuckGo HTML results page into search results.

    Args:
        html: The HTML of the results page.
        limit: The maximum number of results. Clamped to between 1 and 10.
        base_url: The URL that relative result links are resolved against.

    Returns:
        The results in page order. An empty list if the page has no recognizable results.
    """
    soup = BeautifulSoup(html, "lxml")

    results: list[SearchResult] = []

    for anchor in soup.select(RESULT_LINK_SELECTOR):
        href = anchor.get("href")
        if not isinstance(href, str) or not (href := href.strip()):
            continue

        if (url := resolve_result_url(href, base_url)) is None:
            continue

        results.append(
            SearchResult(
                url=url,
                title=_text_or_none(anchor),
                snippet=_snippet_for(anchor),
            )
        )

    return results[: clamp_limit(limit)]
