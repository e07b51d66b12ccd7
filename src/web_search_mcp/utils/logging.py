from fastmcp.utilities.logging import configure_logging, get_logger

BASE_LOGGER = get_logger("web_search_mcp")

if BASE_LOGGER.parent is not None:
    BASE_LOGGER.parent.propagate = False


def setup_logging(level: str = "INFO") -> None:
    configure_logging(level=level)  # pyright: ignore[reportArgumentType]
