from abc import ABC, abstractmethod

from web_search_mcp.models.fetch import FetchOptions


class BaseFetchClient(ABC):
    @abstractmethod
    async def fetch(self, url: str, options: FetchOptions | None = None) -> str: ...
