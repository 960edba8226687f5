"""Filtering, sorting and range helpers for displaying fetched repositories."""

from .models import RepoItem

SORT_ORDERS = ("stars_desc", "name_asc")


def filter_items(items: list[RepoItem], query: str | None) -> list[RepoItem]:
    """Keep items whose full name, description or language contains ``query``.

    Matching is case-insensitive. A blank query keeps everything.
    """
    q = (query or "").strip().casefold()
    if not q:
        return list(items)
    return [
        item
        for item in items
        if q in item.full_name.casefold()
        or q in (item.description or "").casefold()
        or q in (item.primary_language or "").casefold()
    ]


def sort_items(items: list[RepoItem], order: str = "stars_desc") -> list[RepoItem]:
    if order == "stars_desc":
        return sorted(items, key=lambda item: item.star_count, reverse=True)
    if order == "name_asc":
        return sorted(items, key=lambda item: item.full_name.casefold())
    raise ValueError(f"Unknown sort order: {order}")


def page_range(page: int, per_page: int, count: int) -> tuple[int, int]:
    """1-based (first, last) positions shown on a page, e.g. for "showing 31-60"."""
    if count <= 0:
        return (0, 0)
    start = (page - 1) * per_page + 1
    return (start, start + count - 1)
