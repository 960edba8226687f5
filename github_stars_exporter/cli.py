"""CLI commands for browsing and exporting starred repositories."""

import argparse
import json
import sys
from pathlib import Path

from .errors import StarsError
from .models import DEFAULT_PAGE_CAP, DEFAULT_PAGE_SIZE, EXPORT_FORMATS, GITHUB_MAX_PAGE_SIZE
from .view import SORT_ORDERS


def _print_items(items):
    for item in items:
        language = item.primary_language or "-"
        line = f"{item.full_name}  *{item.star_count:,}  [{language}]"
        if item.description:
            line += f"  {item.description}"
        print(line)


def _print_rate(rate):
    if rate.limit is None and rate.remaining is None:
        return
    print(f"Rate limit: {rate.remaining}/{rate.limit} remaining, resets at {rate.reset}")


def _add_view_args(parser):
    parser.add_argument(
        "--filter",
        default=None,
        help="Only show repos whose name, description or language contains this text",
    )
    parser.add_argument(
        "--sort",
        choices=SORT_ORDERS,
        default=None,
        help="Sort order (default: GitHub's order)",
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Browse and export a GitHub user's starred repositories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("results"),
        help="Output directory for exports (default: ./results)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # page subcommand
    page_parser = subparsers.add_parser(
        "page",
        help="Show one page of starred repositories",
    )
    page_parser.add_argument("username", help="GitHub username")
    page_parser.add_argument("--page", type=int, default=1, help="Page number (default: 1)")
    page_parser.add_argument(
        "--per-page",
        type=int,
        default=DEFAULT_PAGE_SIZE,
        help=f"Repos per page, 1-{GITHUB_MAX_PAGE_SIZE} (default: {DEFAULT_PAGE_SIZE})",
    )
    page_parser.add_argument(
        "--skip-cache",
        action="store_true",
        help="Skip reading from cache (still writes to cache)",
    )
    page_parser.add_argument("--json", action="store_true", help="Print the page as JSON")
    _add_view_args(page_parser)

    # all subcommand
    all_parser = subparsers.add_parser(
        "all",
        help="Load every starred repository (follows pagination)",
    )
    all_parser.add_argument("username", help="GitHub username")
    all_parser.add_argument(
        "--per-page",
        type=int,
        default=GITHUB_MAX_PAGE_SIZE,
        help=f"Repos per request (default: {GITHUB_MAX_PAGE_SIZE})",
    )
    all_parser.add_argument(
        "--page-cap",
        type=int,
        default=None,
        help=f"Maximum number of requests (default: {DEFAULT_PAGE_CAP})",
    )
    all_parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    _add_view_args(all_parser)

    # export subcommand
    export_parser = subparsers.add_parser(
        "export",
        help="Export starred repositories to stars.json / stars.csv",
    )
    export_parser.add_argument("username", help="GitHub username")
    export_parser.add_argument(
        "--format",
        choices=EXPORT_FORMATS,
        default="json",
        help="Export format (default: json)",
    )
    export_parser.add_argument(
        "--scope",
        choices=["all", "current"],
        default="all",
        help="Export every starred repo, or only the page given by --page/--per-page",
    )
    export_parser.add_argument("--page", type=int, default=1, help="Page for --scope current")
    export_parser.add_argument(
        "--per-page",
        type=int,
        default=DEFAULT_PAGE_SIZE,
        help="Page size for --scope current",
    )
    export_parser.add_argument(
        "--page-cap",
        type=int,
        default=None,
        help=f"Maximum number of requests for --scope all (default: {DEFAULT_PAGE_CAP})",
    )
    export_parser.add_argument("--pretty", action="store_true", help="Indent JSON output")
    export_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Write the export to stdout instead of --output-dir",
    )
    _add_view_args(export_parser)

    # topics subcommand
    topics_parser = subparsers.add_parser(
        "topics",
        help="Show a repository's topics",
    )
    topics_parser.add_argument("repo", help="Repository as owner/name")

    args = parser.parse_args(argv)

    try:
        return _run(args, parser)
    except StarsError as e:
        json.dump(e.to_dict(), sys.stderr)
        sys.stderr.write("\n")
        return 1


def _run(args, parser):
    if args.command == "page":
        from .fetch_starred import get_starred_page
        from .view import filter_items, page_range, sort_items

        result = get_starred_page(
            args.username,
            page=args.page,
            per_page=args.per_page,
            skip_cache=args.skip_cache,
        )
        items = filter_items(result.items, args.filter)
        if args.sort:
            items = sort_items(items, args.sort)

        if args.json:
            data = result.to_dict()
            data["items"] = [item.to_dict() for item in items]
            json.dump(data, sys.stdout, indent=2)
            sys.stdout.write("\n")
            return 0

        _print_items(items)
        start, end = page_range(args.page, args.per_page, len(result.items))
        print(f"\nShowing {start}-{end}", end="")
        if result.cursor.last:
            print(f" (page {args.page} of {result.cursor.last})", end="")
        print()
        if result.cursor.next:
            print(f"Next page: --page {result.cursor.next}")
        _print_rate(result.rate)
    elif args.command == "all":
        from .fetch_starred import aggregate_all
        from .settings import get_settings
        from .view import filter_items, sort_items

        result = aggregate_all(
            args.username,
            per_page=args.per_page,
            page_cap=args.page_cap if args.page_cap is not None else get_settings().page_cap,
            skip_cache=False,
            verbose=not args.json,
        )
        items = filter_items(result.items, args.filter)
        if args.sort:
            items = sort_items(items, args.sort)

        if args.json:
            data = result.to_dict()
            data["items"] = [item.to_dict() for item in items]
            json.dump(data, sys.stdout, indent=2)
            sys.stdout.write("\n")
            return 0

        _print_items(items)
        print(f"\nDone: {len(result.items)} repos from {result.pages_fetched} pages", end="")
        print(" (truncated at page cap)" if result.truncated else "")
        _print_rate(result.rate)
    elif args.command == "export":
        from .export import StreamSink, export_current, export_stars

        sink = StreamSink(sys.stdout.buffer) if args.stdout else None
        if args.scope == "current":
            result = export_current(
                args.username,
                fmt=args.format,
                page=args.page,
                per_page=args.per_page,
                query=args.filter,
                order=args.sort,
                sink=sink,
                output_dir=args.output_dir,
            )
        else:
            result = export_stars(
                args.username,
                fmt=args.format,
                sink=sink,
                output_dir=args.output_dir,
                page_cap=args.page_cap,
                pretty=args.pretty,
            )
        if not args.stdout:
            print(f"Exported {result.count} repos to {result.format} at {result.location}")
    elif args.command == "topics":
        from .topics import TopicsClient

        topics = TopicsClient().get_topics(args.repo)
        print("\n".join(topics) if topics else "(no topics)")
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
