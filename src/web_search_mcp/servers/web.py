from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from web_search_mcp.clients.extract.base import BaseExtractClient
from web_search_mcp.clients.extract.readability import ReadabilityExtractClient
from web_search_mcp.clients.fetch.base import BaseFetchClient
from web_search_mcp.clients.fetch.bounded import BoundedFetchClient
from web_search_mcp.clients.search.base import BaseSearchClient
from web_search_mcp.clients.search.duckduckgo import DuckDuckGoClient
from web_search_mcp.models.fetch import FetchOptions, FetchOutcome, FetchPageErrorResponse, FetchPageResponse
from web_search_mcp.models.search import SearchErrorResponse, SearchResult
from web_search_mcp.utils.logging import BASE_LOGGER

logger = BASE_LOGGER.getChild("server")

SEARCH_RESULTS_ADAPTER = TypeAdapter(list[SearchResult])


class WebSearchServer(BaseModel):
    """Exposes web search and page fetching as tools.

    Tool failures are never raised to the caller. They are returned in-band as a JSON
    payload with an `error` field.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(arbitrary_types_allowed=True)

    fetch_options: FetchOptions = Field(default_factory=FetchOptions)
    fetch_client: BaseFetchClient = Field(default_factory=BoundedFetchClient)
    search_client: BaseSearchClient = Field(default_factory=DuckDuckGoClient)
    extract_client: BaseExtractClient = Field(default_factory=ReadabilityExtractClient)

    async def fetch_readable(self, url: str, options: FetchOptions | None = None) -> FetchOutcome:
        """Fetch the URL under the byte budget and extract its readable content."""

        html = await self.fetch_client.fetch(url, options or self.fetch_options)

        return await self.extract_client.extract(html, url)

    async def search_web(
        self,
        query: Annotated[str, "The search query."],
        limit: Annotated[int, "The maximum number of results to return, between 1 and 10."] = 5,
    ) -> str:
        """Search the web and return a list of result URLs and titles. Uses DuckDuckGo HTML."""

        try:
            response = await self.search_client.search(query, results=limit)
        except Exception as e:
            logger.exception(f"Error searching for {query!r}")
            return SearchErrorResponse(error=str(e)).model_dump_json()

        return SEARCH_RESULTS_ADAPTER.dump_json(response.results, exclude_none=True).decode()

    async def fetch_page(self, url: Annotated[str, "The absolute http(s) URL of the page to fetch."]) -> str:
        """Fetch a page and extract its readable content and title using Readability."""

        try:
            outcome = await self.fetch_readable(url)
        except Exception as e:
            logger.exception(f"Error fetching {url}")
            return FetchPageErrorResponse(url=url, error=str(e)).model_dump_json()

        return FetchPageResponse(url=url, title=outcome.title, content=outcome.content).model_dump_json(exclude_none=True)
