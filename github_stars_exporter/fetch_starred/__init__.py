from .aggregate import aggregate_all
from .fetch_page import fetch_page, get_starred_page, parse_rate_snapshot

__all__ = ["aggregate_all", "fetch_page", "get_starred_page", "parse_rate_snapshot"]
