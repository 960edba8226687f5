"""Cached GitHub REST API client using httpx + Cachetta."""

import hashlib
import json
from datetime import timedelta
from pathlib import Path

import httpx
from cachetta import Cachetta

from .errors import NetworkFailure, RemoteError
from .models import ApiResponse
from .settings import get_settings

DEFAULT_CACHE_DIR = Path.home() / ".cache/github-stars-exporter"
API_VERSION = "2022-11-28"
RATE_LIMIT_FIELDS = ("limit", "remaining", "reset")


def _cache_path(cache_dir: Path):
    def _path(endpoint, params=None):
        params = params or {}
        raw = f"{endpoint}|{json.dumps(params, sort_keys=True)}"
        key = hashlib.sha256(raw.encode()).hexdigest()[:16]
        return Path(cache_dir) / f"{key}.json"

    return _path


class StarsClient:
    """Thin cached client for the GitHub REST API.

    The token is optional; without one GitHub applies the lower anonymous
    rate limit. Nothing is retried: the first failure is raised as
    RemoteError or NetworkFailure.
    """

    def __init__(self, token=None, cache_dir=None, skip_cache=False):
        settings = get_settings()
        token = token or settings.github_token
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(headers=headers, timeout=settings.request_timeout)
        self._api_base = settings.github_api_base.rstrip("/")
        self._skip_cache = skip_cache
        self.authenticated = bool(token)

        # Pure fetch function -- no cache logic.
        # Cachetta handles caching; exceptions propagate (not cached).
        def _do_fetch(endpoint, params=None):
            ep = endpoint if endpoint.startswith("/") else f"/{endpoint}"
            url = f"{self._api_base}{ep}"
            try:
                resp = self._client.request("GET", url, params=params)
            except httpx.TransportError as e:
                raise NetworkFailure(str(e) or type(e).__name__) from e

            if not 200 <= resp.status_code < 300:
                raise RemoteError(resp.status_code, resp.text)

            try:
                body = resp.json() if resp.content else {}
            except ValueError as e:
                raise RemoteError(resp.status_code, resp.text) from e

            return {
                "status": resp.status_code,
                "body": body,
                "link": resp.headers.get("link"),
                "rate_limit": {
                    name: resp.headers.get(f"x-ratelimit-{name}") for name in RATE_LIMIT_FIELDS
                },
            }

        cache = Cachetta(
            path=_cache_path(cache_dir or DEFAULT_CACHE_DIR),
            duration=timedelta(seconds=settings.cache_ttl_seconds),
        )
        self._cached_fetch = cache(_do_fetch)
        self._skip_read_fetch = cache.copy(read=False)(_do_fetch)

    def api(self, endpoint, params=None, skip_cache=False):
        """Make a cached GET against the GitHub REST API.

        Args:
            endpoint: API path, e.g. "users/octocat/starred"
            params: Query parameters dict
            skip_cache: Skip reading cache for this call (still writes)

        Returns:
            ApiResponse with status, body, link and raw rate limit headers.
        """
        params = params or {}
        if skip_cache or self._skip_cache:
            data = self._skip_read_fetch(endpoint, params)
        else:
            data = self._cached_fetch(endpoint, params)

        return ApiResponse(
            status=data["status"],
            body=data["body"],
            link=data.get("link"),
            rate_limit=data.get("rate_limit") or {},
        )

    def close(self):
        self._client.close()


# Client instances keyed by config
_clients: dict[tuple, StarsClient] = {}


def get_client(token=None, cache_dir=None, skip_cache=False) -> StarsClient:
    """Get or create a StarsClient with the given configuration."""
    key = (token, str(cache_dir) if cache_dir else None, skip_cache)
    if key not in _clients:
        _clients[key] = StarsClient(token=token, cache_dir=cache_dir, skip_cache=skip_cache)
    return _clients[key]
