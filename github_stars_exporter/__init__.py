"""Browse and export a GitHub user's starred repositories.

Follows GitHub's Link header pagination across every page of
``/users/{username}/starred`` and writes the result as JSON or CSV.
"""

from .cli import main
from .client import get_client
from .errors import InvalidInputError, NetworkFailure, RemoteError, StarsError
from .export import export_current, export_stars
from .fetch_starred import aggregate_all, fetch_page, get_starred_page
from .link_header import parse_link_header
from .models import AggregationResult, PageCursor, RateSnapshot, RepoItem, StarredPage
from .normalize import normalize

__all__ = [
    "main",
    "get_client",
    "InvalidInputError",
    "NetworkFailure",
    "RemoteError",
    "StarsError",
    "export_current",
    "export_stars",
    "aggregate_all",
    "fetch_page",
    "get_starred_page",
    "parse_link_header",
    "AggregationResult",
    "PageCursor",
    "RateSnapshot",
    "RepoItem",
    "StarredPage",
    "normalize",
]

if __name__ == "__main__":
    main()
