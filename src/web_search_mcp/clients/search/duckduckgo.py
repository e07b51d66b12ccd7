import asyncio
from typing import override

from yarl import URL

from web_search_mcp.clients.fetch.base import BaseFetchClient
from web_search_mcp.clients.fetch.bounded import BoundedFetchClient
from web_search_mcp.clients.search.base import BaseSearchClient
from web_search_mcp.models.fetch import FetchOptions
from web_search_mcp.models.search import SearchResponse
from web_search_mcp.parsers.results import parse_search_results
from web_search_mcp.utils.logging import BASE_LOGGER

logger = BASE_LOGGER.getChild("search")

DUCKDUCKGO_HTML_URL = "https://duckduckgo.com/html"


class DuckDuckGoClient(BaseSearchClient):
    """Searches by scraping the DuckDuckGo HTML results page. No API key is required."""

    def __init__(self, fetch_client: BaseFetchClient | None = None, options: FetchOptions | None = None):
        self.fetch_client = fetch_client or BoundedFetchClient()
        self.options = options

    def search_url(self, query: str) -> str:
        return str(URL(DUCKDUCKGO_HTML_URL).with_query(q=query))

    @override
    async def search(self, query: str, results: int = 5) -> SearchResponse:
        html = await self.fetch_client.fetch(self.search_url(query), self.options)

        search_results = await asyncio.to_thread(parse_search_results, html, results)

        logger.info(f"Search for {query!r} returned {len(search_results)} results")

        return SearchResponse(results=search_results)
