"""Render RepoItem lists as JSON or CSV bytes."""

import csv
import io
import json
import re

from ..models import RepoItem

# Export column names follow GitHub's field names, not RepoItem attributes
CSV_HEADERS = [
    "id",
    "full_name",
    "url",
    "description",
    "stars",
    "language",
    "owner_login",
    "owner_url",
]

_NEWLINES = re.compile(r"\r\n|\r|\n")


def _csv_field(value) -> str:
    if value is None:
        return ""
    return _NEWLINES.sub(" ", str(value))


def _csv_row(item: RepoItem) -> list[str]:
    return [
        _csv_field(v)
        for v in (
            item.id,
            item.full_name,
            item.url,
            item.description,
            item.star_count,
            item.primary_language,
            item.owner.login,
            item.owner.url,
        )
    ]


def to_csv(items: list[RepoItem]) -> bytes:
    """Render items as CSV, one row per item in input order.

    Newlines inside a field become spaces. A field is quoted, with inner
    quotes doubled, only when it contains a comma or a quote.
    """
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(CSV_HEADERS)
    writer.writerows(_csv_row(item) for item in items)
    return output.getvalue().encode("utf-8")


def to_json(items: list[RepoItem], pretty: bool = False) -> bytes:
    data = [item.to_dict() for item in items]
    if pretty:
        return (json.dumps(data, indent=2, ensure_ascii=False) + "\n").encode("utf-8")
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def serialize(items: list[RepoItem], fmt: str, pretty: bool = False) -> bytes:
    if fmt == "csv":
        return to_csv(items)
    if fmt == "json":
        return to_json(items, pretty=pretty)
    raise ValueError(f"Unsupported export format: {fmt}")
