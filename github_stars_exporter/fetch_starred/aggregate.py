"""Collect every starred repository by following Link header ``next`` pointers."""

import sys

from ..client import StarsClient, get_client
from ..errors import InvalidInputError, StarsError
from ..models import DEFAULT_PAGE_CAP, GITHUB_MAX_PAGE_SIZE, AggregationResult, RateSnapshot
from ..schemas import validate_starred_query
from .fetch_page import fetch_page


def _log(msg: str):
    sys.stderr.write(f"[stars] {msg}\n")
    sys.stderr.flush()


def aggregate_all(
    subject: str,
    client: StarsClient | None = None,
    per_page: int = GITHUB_MAX_PAGE_SIZE,
    page_cap: int = DEFAULT_PAGE_CAP,
    skip_cache: bool = True,
    verbose: bool = False,
) -> AggregationResult:
    """Fetch pages sequentially until ``next`` disappears or ``page_cap`` is hit.

    Each page number comes from the previous response's Link header, so the
    pages cannot be fetched in parallel. The cap counts requests, not items;
    it bounds cyclic or endless ``next`` chains.

    The first failing page stops the loop and its error is raised. Items
    collected before the failure are attached to the error as ``collected``
    for diagnostics only.
    """
    if page_cap < 1:
        raise InvalidInputError("page_cap must be at least 1")
    subject = validate_starred_query(subject=subject, per_page=per_page).subject

    client = client or get_client()
    items = []
    rate = RateSnapshot()
    pages_fetched = 0
    page = 1

    while True:
        # Checked before fetching so the cap never causes an extra request
        if pages_fetched >= page_cap:
            _log(f"Stopped after {pages_fetched} pages (page cap), results are truncated")
            return AggregationResult(items=items, pages_fetched=pages_fetched, truncated=True, rate=rate)

        try:
            result = fetch_page(subject, page=page, per_page=per_page, client=client, skip_cache=skip_cache)
        except StarsError as e:
            e.pages_fetched = pages_fetched
            e.collected = items
            raise

        pages_fetched += 1
        items.extend(result.items)
        rate = result.rate
        if verbose:
            _log(f"page {page}: {len(result.items)} repos ({len(items)} total)")

        if result.cursor.next is None:
            return AggregationResult(items=items, pages_fetched=pages_fetched, truncated=False, rate=rate)
        page = result.cursor.next
