"""Fetch a single page of a user's starred repositories."""

from urllib.parse import quote

from ..client import StarsClient, get_client
from ..link_header import parse_link_header
from ..models import DEFAULT_PAGE_SIZE, RateSnapshot, StarredPage
from ..normalize import normalize_all
from ..schemas import validate_starred_query


def _to_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_rate_snapshot(rate_limit: dict[str, str | None]) -> RateSnapshot:
    """Convert raw x-ratelimit-* header values to a RateSnapshot."""
    return RateSnapshot(
        limit=_to_int(rate_limit.get("limit")),
        remaining=_to_int(rate_limit.get("remaining")),
        reset=_to_int(rate_limit.get("reset")),
    )


def fetch_page(
    subject: str,
    page: int = 1,
    per_page: int = DEFAULT_PAGE_SIZE,
    client: StarsClient | None = None,
    skip_cache: bool = False,
) -> StarredPage:
    """Fetch one page of starred repositories for ``subject``.

    ``per_page`` must already be within GitHub's 1..100 range.
    Raises RemoteError on a non-success status and NetworkFailure on
    transport errors.
    """
    client = client or get_client()
    resp = client.api(
        f"users/{quote(subject, safe='')}/starred",
        params={"page": page, "per_page": per_page},
        skip_cache=skip_cache,
    )

    records = resp.body if isinstance(resp.body, list) else []
    return StarredPage(
        items=normalize_all(records),
        cursor=parse_link_header(resp.link),
        rate=parse_rate_snapshot(resp.rate_limit),
    )


def get_starred_page(
    subject: str,
    page: int = 1,
    per_page: int = DEFAULT_PAGE_SIZE,
    client: StarsClient | None = None,
    skip_cache: bool = False,
) -> StarredPage:
    """Validate the request, then fetch the page.

    Raises InvalidInputError without touching the network when the subject
    is blank or the page or page size is out of range.
    """
    query = validate_starred_query(subject=subject, page=page, per_page=per_page)
    return fetch_page(
        query.subject,
        page=query.page,
        per_page=query.per_page,
        client=client,
        skip_cache=skip_cache,
    )
