import asyncio
from typing import override

from bs4 import BeautifulSoup
from lxml.etree import ParserError
from readability import Document
from readability.readability import Unparseable

from web_search_mcp.clients.extract.base import BaseExtractClient
from web_search_mcp.models.fetch import FetchOutcome
from web_search_mcp.utils.logging import BASE_LOGGER

logger = BASE_LOGGER.getChild("extract")

NON_CONTENT_TAGS = ["script", "style", "noscript", "template"]


def html_to_text(html: str) -> str:
    soup = BeautifulSoup(html, "lxml")

    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()

    return soup.get_text("\n", strip=True)


def body_text(html: str) -> str:
    """The trimmed text of the document body, or an empty string if there is none."""
    soup = BeautifulSoup(html, "lxml")

    if soup.body is None:
        return ""

    for tag in soup.body(NON_CONTENT_TAGS):
        tag.decompose()

    return soup.body.get_text("\n", strip=True)


def extract_readable(html: str, base_url: str) -> FetchOutcome:
    """Extract the main article text and title from an HTML document.

    Falls back to the text of the whole body when no article can be found, and to an
    empty string when the body has no text either. Never raises for a missed extraction.

    Args:
        html: The (already truncated) HTML of the page.
        base_url: The URL of the page, used to resolve relative links.
    """
    if not html.strip():
        return FetchOutcome(content="")

    try:
        document = Document(html, url=base_url)
        content = html_to_text(document.summary(html_partial=True))
        title = document.short_title()
        page_title = document.title()
    except (Unparseable, ParserError, ValueError) as e:
        logger.info(f"Readability could not parse {base_url}: {e}")
        content, title, page_title = "", None, None

    # readability hoists the <title> into the summary of pages with an empty body
    if content and content not in {title, page_title}:
        return FetchOutcome(content=content, title=title or None)

    logger.info(f"No article found in {base_url}, falling back to body text")
    return FetchOutcome(content=body_text(html))


class ReadabilityExtractClient(BaseExtractClient):
    @override
    async def extract(self, html: str, base_url: str) -> FetchOutcome:
        return await asyncio.to_thread(extract_readable, html, base_url)
