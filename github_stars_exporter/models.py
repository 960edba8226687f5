"""Data models and constants for starred repository export."""

from dataclasses import asdict, dataclass, field

GITHUB_MAX_PAGE_SIZE = 100  # GitHub REST API hard limit for per_page
DEFAULT_PAGE_SIZE = 30
DEFAULT_PAGE_CAP = 100

CURSOR_RELATIONS = ("first", "prev", "next", "last")
EXPORT_FORMATS = ("json", "csv")


@dataclass
class ApiResponse:
    """Response from the GitHub REST API client."""

    status: int
    body: dict | list
    link: str | None = None
    # Raw x-ratelimit-* header values keyed by suffix (limit, remaining, reset)
    rate_limit: dict[str, str | None] = field(default_factory=dict)


@dataclass(frozen=True)
class RepoOwner:
    login: str
    avatar_url: str
    url: str


@dataclass(frozen=True)
class RepoItem:
    """A starred repository in the shape the rest of the tool works with."""

    id: int
    full_name: str
    url: str
    description: str | None
    star_count: int
    primary_language: str | None
    owner: RepoOwner

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PageCursor:
    """Named page numbers advertised by a Link header.

    Absence of ``next`` is the only signal that pagination is exhausted.
    """

    first: int | None = None
    prev: int | None = None
    next: int | None = None
    last: int | None = None

    def to_dict(self) -> dict[str, int]:
        return {rel: getattr(self, rel) for rel in CURSOR_RELATIONS if getattr(self, rel) is not None}


@dataclass(frozen=True)
class RateSnapshot:
    """Rate limit state reported by the most recent response. Advisory only."""

    limit: int | None = None
    remaining: int | None = None
    reset: int | None = None  # unix timestamp when the window resets

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class StarredPage:
    """One page of starred repositories."""

    items: list[RepoItem]
    cursor: PageCursor
    rate: RateSnapshot

    def to_dict(self) -> dict:
        return {
            "items": [item.to_dict() for item in self.items],
            "cursor": self.cursor.to_dict(),
            "rate": self.rate.to_dict(),
        }


@dataclass
class AggregationResult:
    """Every starred repository collected by following ``next`` links.

    Items keep remote page order, then in-page order. Repositories starred or
    unstarred between page fetches can show up twice; they are not removed.
    """

    items: list[RepoItem]
    pages_fetched: int
    truncated: bool
    rate: RateSnapshot = field(default_factory=RateSnapshot)

    def to_dict(self) -> dict:
        return {
            "items": [item.to_dict() for item in self.items],
            "pages_fetched": self.pages_fetched,
            "truncated": self.truncated,
            "rate": self.rate.to_dict(),
        }


@dataclass
class SinkResult:
    location: str
    byte_count: int


@dataclass
class ExportResult:
    """Outcome of a completed export."""

    count: int
    location: str
    format: str
    byte_count: int = 0
    truncated: bool = False
    ok: bool = True

    def to_dict(self) -> dict:
        return {"ok": self.ok, "count": self.count, "location": self.location, "format": self.format}
