import asyncio
import codecs
import contextlib
from collections.abc import AsyncIterator
from typing import override
from urllib.parse import urlsplit

from aiohttp import ClientError, ClientResponse, ClientSession, ClientTimeout

from web_search_mcp.clients.fetch.base import BaseFetchClient
from web_search_mcp.errors import FetchNetworkError, FetchTimeoutError, InvalidURLError
from web_search_mcp.models.fetch import FetchOptions
from web_search_mcp.utils.logging import BASE_LOGGER

logger = BASE_LOGGER.getChild("fetch")

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; WebSearchMCP/1.0)"
DEFAULT_CHARSET = "utf-8"
CHUNK_SIZE = 64 * 1024


def validate_url(url: str) -> str:
    """Ensure the URL is an absolute http(s) URL with a host.

    Raises:
        InvalidURLError: If the URL cannot be parsed or is not absolute.
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidURLError(url) from e

    if parts.scheme not in {"http", "https"} or not parts.netloc:
        raise InvalidURLError(url)

    return url


def get_decoder(charset: str | None) -> codecs.IncrementalDecoder:
    """Get a permissive incremental decoder for the charset, falling back to UTF-8 when it is unknown."""
    try:
        factory = codecs.getincrementaldecoder(charset or DEFAULT_CHARSET)
    except LookupError:
        factory = codecs.getincrementaldecoder(DEFAULT_CHARSET)

    return factory(errors="replace")


class BoundedFetchClient(BaseFetchClient):
    """Fetches a URL as text without ever holding more than `max_bytes` of the body.

    The body is streamed and decoded chunk by chunk. Once the byte budget is spent the
    response is closed early instead of draining the rest of the transfer. The whole
    request runs under a single deadline of `timeout_ms`.
    """

    session: ClientSession | None

    def __init__(
        self,
        session: ClientSession | None = None,
        options: FetchOptions | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.session = session
        self.options = options or FetchOptions()
        self.user_agent = user_agent

    @contextlib.asynccontextmanager
    async def _session(self) -> AsyncIterator[ClientSession]:
        if self.session is not None:
            yield self.session
            return

        async with ClientSession(timeout=ClientTimeout(total=None)) as session:
            yield session

    @override
    async def fetch(self, url: str, options: FetchOptions | None = None) -> str:
        """Fetch the URL and return at most `options.max_bytes` of its decoded body.

        Non-2xx responses are returned like any other; only timeouts and transport
        failures raise.

        Raises:
            InvalidURLError: If the URL is not an absolute http(s) URL.
            FetchTimeoutError: If the request does not complete within `options.timeout_ms`.
            FetchNetworkError: If the connection fails (DNS, connect, TLS, reset).
        """
        options = options or self.options
        validate_url(url)

        logger.info(f"Fetching {url} (timeout={options.timeout_ms}ms, max_bytes={options.max_bytes})")

        try:
            async with asyncio.timeout(options.timeout_ms / 1000), self._session() as session:
                async with session.get(url, headers={"User-Agent": self.user_agent}) as response:
                    return await self._read_bounded(url, response, options.max_bytes)
        except TimeoutError as e:
            raise FetchTimeoutError(url, options.timeout_ms) from e
        except (ClientError, OSError) as e:
            raise FetchNetworkError(url, str(e) or type(e).__name__) from e

    async def _read_bounded(self, url: str, response: ClientResponse, max_bytes: int) -> str:
        if response.content is None:  # pyright: ignore[reportUnnecessaryComparison]
            # Without a body stream the budget can only be applied to decoded characters.
            text = await response.text(errors="replace")
            return text[:max_bytes]

        decoder = get_decoder(response.charset)
        chunks: list[str] = []
        received = 0

        async for chunk in response.content.iter_chunked(CHUNK_SIZE):
            data = chunk[: max_bytes - received]
            received += len(data)
            chunks.append(decoder.decode(data))

            if received >= max_bytes:
                logger.info(f"Truncated response from {url} at {received} bytes")
                with contextlib.suppress(ClientError, OSError):
                    response.close()
                break

        chunks.append(decoder.decode(b"", final=True))

        return "".join(chunks)[:max_bytes]
