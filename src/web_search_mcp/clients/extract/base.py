from abc import ABC, abstractmethod

from web_search_mcp.models.fetch import FetchOutcome


class BaseExtractClient(ABC):
    @abstractmethod
    async def extract(self, html: str, base_url: str) -> FetchOutcome: ...
