from fastmcp.exceptions import ToolError


class WebSearchMCPError(ToolError):
    pass


class InvalidURLError(WebSearchMCPError):
    def __init__(self, url: str):
        super().__init__(f"Invalid URL {url!r}: expected an absolute http or https URL")


class FetchTimeoutError(WebSearchMCPError):
    def __init__(self, url: str, timeout_ms: int):
        super().__init__(f"Fetching {url} timed out after {timeout_ms}ms")


class FetchNetworkError(WebSearchMCPError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"Error fetching {url}: {reason}")
