"""Input validation for new facts."""

from urllib.parse import urlparse

from board import categories

MAX_FACT_LENGTH = 200

_ALLOWED_SCHEMES = {"http", "https"}

# Characters a URL parser refuses inside a host
_FORBIDDEN_HOST_CHARS = set(" \t\n\r<>\"{}|\\^`")


def is_valid_url(url: str) -> bool:
    """True for a parseable http(s) URL with a host. Never raises."""
    if not url or not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url.strip())
        # .port raises ValueError on a malformed port
        parsed.port
    except ValueError:
        return False
    if parsed.scheme not in _ALLOWED_SCHEMES:
        return False
    host = parsed.hostname
    if not host or _FORBIDDEN_HOST_CHARS.intersection(host):
        return False
    try:
        host.encode("idna")
    except UnicodeError:
        return False
    return True


def is_valid_fact_input(text: str, source: str, category: str) -> bool:
    """Gate for submission: all three fields must pass."""
    if not text or len(text) > MAX_FACT_LENGTH:
        return False
    if not is_valid_url(source):
        return False
    return bool(category) and categories.is_category(category)
