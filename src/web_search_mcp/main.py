import asyncio
from typing import Any, Literal

import asyncclick as click
from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.tools.tool import Tool

from web_search_mcp.clients.fetch.bounded import DEFAULT_USER_AGENT, BoundedFetchClient
from web_search_mcp.clients.search.duckduckgo import DuckDuckGoClient
from web_search_mcp.models.fetch import DEFAULT_MAX_BYTES, DEFAULT_TIMEOUT_MS, FetchOptions
from web_search_mcp.servers.web import WebSearchServer
from web_search_mcp.utils.logging import BASE_LOGGER, setup_logging

load_dotenv()

logger = BASE_LOGGER.getChild("main")

TRANSPORT_HELP = "The transport to use for the MCP server."
TIMEOUT_MS_HELP = "The default timeout (in milliseconds) for a single fetch. Default is 15000."
MAX_BYTES_HELP = "The maximum number of bytes kept from a fetched response. Default is 1500000."
USER_AGENT_HELP = "The User-Agent header sent with every request."
LOG_LEVEL_HELP = "The log level for the server."


def build_server(timeout_ms: int = DEFAULT_TIMEOUT_MS, max_bytes: int = DEFAULT_MAX_BYTES, user_agent: str = DEFAULT_USER_AGENT):
    fetch_options = FetchOptions(timeout_ms=timeout_ms, max_bytes=max_bytes)
    fetch_client = BoundedFetchClient(options=fetch_options, user_agent=user_agent)

    return WebSearchServer(
        fetch_options=fetch_options,
        fetch_client=fetch_client,
        search_client=DuckDuckGoClient(fetch_client=fetch_client, options=fetch_options),
    )


def build_mcp(web_server: WebSearchServer) -> FastMCP[Any]:
    mcp = FastMCP[Any](name="Web Search MCP")

    mcp.add_tool(Tool.from_function(web_server.search_web, name="search_web"))
    mcp.add_tool(Tool.from_function(web_server.fetch_page, name="fetch_page"))

    return mcp


@click.command()
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    envvar="WEB_SEARCH_MCP_TRANSPORT",
    default="stdio",
    help=TRANSPORT_HELP,
)
@click.option("--timeout-ms", type=click.IntRange(min=1), envvar="WEB_SEARCH_MCP_TIMEOUT_MS", default=DEFAULT_TIMEOUT_MS, help=TIMEOUT_MS_HELP)
@click.option("--max-bytes", type=click.IntRange(min=1), envvar="WEB_SEARCH_MCP_MAX_BYTES", default=DEFAULT_MAX_BYTES, help=MAX_BYTES_HELP)
@click.option("--user-agent", type=str, envvar="WEB_SEARCH_MCP_USER_AGENT", default=DEFAULT_USER_AGENT, help=USER_AGENT_HELP)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    envvar="WEB_SEARCH_MCP_LOG_LEVEL",
    default="INFO",
    help=LOG_LEVEL_HELP,
)
async def cli(
    transport: Literal["stdio", "sse", "streamable-http"],
    timeout_ms: int,
    max_bytes: int,
    user_agent: str,
    log_level: str,
):
    setup_logging(level=log_level)

    mcp = build_mcp(build_server(timeout_ms=timeout_ms, max_bytes=max_bytes, user_agent=user_agent))

    logger.info(f"Starting Web Search MCP over {transport} (timeout={timeout_ms}ms, max_bytes={max_bytes})")
    await mcp.run_async(transport=transport)


def run_mcp():
    asyncio.run(cli())


if __name__ == "__main__":
    run_mcp()
