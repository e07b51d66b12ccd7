from urllib.parse import parse_qs, urlsplit

REDIRECT_HOST = "duckduckgo.com"
REDIRECT_PATH_PREFIX = "/l/"
REDIRECT_TARGET_PARAM = "uddg"


def is_redirect_host(hostname: str | None) -> bool:
    if not hostname:
        return False

    return hostname == REDIRECT_HOST or hostname.endswith(f".{REDIRECT_HOST}")


def normalize_link(raw_href: str) -> str:
    """Unwrap a DuckDuckGo redirect link into the URL it points to.

    Protocol-relative links are upgraded to https first. Anything that is not a
    redirect link, or that cannot be parsed, is returned as-is.

    Example:
        >>> normalize_link("//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.com%2Fa")
        'https://example.com/a'
    """
    href = f"https:{raw_href}" if raw_href.startswith("//") else raw_href

    try:
        parts = urlsplit(href)
        hostname = parts.hostname
    except ValueError:
        return href

    if is_redirect_host(hostname) and parts.path.startswith(REDIRECT_PATH_PREFIX):
        # parse_qs percent-decodes the value
        targets = parse_qs(parts.query).get(REDIRECT_TARGET_PARAM)
        if targets and targets[0]:
            return targets[0]

    return href
