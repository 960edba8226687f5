"""Map raw GitHub repository records to RepoItem.

This is the only place that knows the remote field names.
"""

from .models import RepoItem, RepoOwner


def normalize(raw: dict) -> RepoItem:
    owner = raw.get("owner") or {}
    return RepoItem(
        id=raw.get("id"),
        full_name=raw.get("full_name"),
        url=raw.get("html_url"),
        description=raw.get("description"),
        star_count=raw.get("stargazers_count") or 0,
        primary_language=raw.get("language"),
        owner=RepoOwner(
            login=owner.get("login", ""),
            avatar_url=owner.get("avatar_url", ""),
            url=owner.get("html_url", ""),
        ),
    )


def normalize_all(records: list[dict]) -> list[RepoItem]:
    return [normalize(r) for r in records]
