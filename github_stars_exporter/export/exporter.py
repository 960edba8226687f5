"""Export starred repositories to JSON or CSV."""

import sys
from pathlib import Path

from ..client import StarsClient, get_client
from ..errors import InvalidInputError
from ..fetch_starred import aggregate_all, fetch_page
from ..models import GITHUB_MAX_PAGE_SIZE, ExportResult
from ..schemas import validate_export_request
from ..settings import get_settings
from ..view import filter_items, sort_items
from .serialize import serialize
from .sink import FileSink


def _log(msg: str):
    sys.stderr.write(f"[export] {msg}\n")
    sys.stderr.flush()


def export_stars(
    subject: str,
    fmt: str = "json",
    sink=None,
    output_dir: Path | None = None,
    client: StarsClient | None = None,
    page_cap: int | None = None,
    pretty: bool = False,
) -> ExportResult:
    """Fetch every starred repository and write it as ``stars.<fmt>``.

    Nothing is written unless the whole aggregation succeeds. Without a
    ``sink`` the file goes to ``output_dir`` (default: current directory).
    """
    request = validate_export_request(subject=subject, format=fmt, scope="all")
    client = client or get_client()

    result = aggregate_all(
        request.subject,
        client=client,
        per_page=GITHUB_MAX_PAGE_SIZE,
        page_cap=page_cap if page_cap is not None else get_settings().page_cap,
        skip_cache=True,
    )
    if result.truncated:
        _log(f"Page cap reached after {result.pages_fetched} pages; exporting {len(result.items)} repos")

    payload = serialize(result.items, request.format, pretty=pretty)
    sink = sink or FileSink(output_dir or Path.cwd())
    written = sink.persist(payload, f"stars.{request.format}")

    return ExportResult(
        count=len(result.items),
        location=written.location,
        format=request.format,
        byte_count=written.byte_count,
        truncated=result.truncated,
    )


def export_current(
    subject: str,
    fmt: str = "json",
    page: int = 1,
    per_page: int = 30,
    query: str | None = None,
    order: str | None = None,
    sink=None,
    output_dir: Path | None = None,
    client: StarsClient | None = None,
) -> ExportResult:
    """Export one page as currently viewed (optionally filtered and sorted) to ``stars_current.<fmt>``."""
    request = validate_export_request(
        subject=subject, format=fmt, scope="current", page=page, per_page=per_page
    )
    starred = fetch_page(request.subject, page=request.page, per_page=request.per_page, client=client)

    items = filter_items(starred.items, query)
    if order:
        items = sort_items(items, order)
    if not items:
        raise InvalidInputError("Nothing to export in current view")

    payload = serialize(items, request.format, pretty=True)
    sink = sink or FileSink(output_dir or Path.cwd())
    written = sink.persist(payload, f"stars_current.{request.format}")

    return ExportResult(
        count=len(items),
        location=written.location,
        format=request.format,
        byte_count=written.byte_count,
    )
