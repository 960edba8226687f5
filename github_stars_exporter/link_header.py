"""RFC 5988 Link header parsing for GitHub pagination."""

import math
import re
from urllib.parse import parse_qs, urlsplit

from .models import CURSOR_RELATIONS, PageCursor

_REL_PATTERN = re.compile(r'rel="([^"]*)"')


def _page_number(url_part: str) -> int | None:
    """Extract a positive whole ``page`` query value from an absolute URL."""
    try:
        parts = urlsplit(url_part)
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None

    values = parse_qs(parts.query).get("page")
    if not values:
        return None
    try:
        number = float(values[0])
    except ValueError:
        return None
    if not math.isfinite(number) or number <= 0 or not number.is_integer():
        return None
    return int(number)


def _relation(params: list[str]) -> str | None:
    for param in params:
        match = _REL_PATTERN.search(param)
        if match:
            return match.group(1)
    return None


def parse_link_header(value: str | None) -> PageCursor:
    """Decode a Link header into a PageCursor.

    Entries that are malformed, carry an unknown relation, or point at a
    page that is not a positive whole number are dropped. Never raises.

    Example:
        '<https://x/y?page=2>; rel="next", <https://x/y?page=5>; rel="last"'
        -> PageCursor(next=2, last=5)
    """
    if not value:
        return PageCursor()

    pages: dict[str, int] = {}
    for entry in value.split(","):
        segments = entry.split(";")
        if len(segments) < 2:
            continue

        url_part = segments[0].strip().strip("<>").strip()
        rel = _relation(segments[1:])
        if rel not in CURSOR_RELATIONS:
            continue

        page = _page_number(url_part)
        if page is None:
            continue
        pages[rel] = page

    return PageCursor(**pages)
