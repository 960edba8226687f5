"""Helpers for building fake GitHub responses."""

import json
from unittest.mock import MagicMock

import httpx


def make_settings(**overrides):
    values = {
        "github_token": "test-token",
        "github_api_base": "https://api.github.com",
        "request_timeout": 30.0,
        "cache_ttl_seconds": 60,
        "page_cap": 100,
    }
    values.update(overrides)
    return MagicMock(**values)


def mock_response(status_code=200, json_body=None, headers=None, text=None):
    resp = MagicMock(spec=httpx.Response)
    resp.status_code = status_code
    resp.content = json.dumps(json_body).encode() if json_body is not None else b""
    resp.json.return_value = json_body
    resp.text = text if text is not None else (json.dumps(json_body) if json_body is not None else "")
    resp.headers = headers or {}
    resp.request = MagicMock()
    return resp


def raw_repo(i, owner="owner", description=None):
    return {
        "id": i,
        "name": f"repo{i}",
        "full_name": f"{owner}/repo{i}",
        "html_url": f"https://github.com/{owner}/repo{i}",
        "description": description if description is not None else f"Repository {i}",
        "stargazers_count": i * 10,
        "language": "Python" if i % 2 else None,
        "owner": {
            "login": owner,
            "avatar_url": f"https://avatars.githubusercontent.com/{owner}",
            "html_url": f"https://github.com/{owner}",
        },
    }


def starred_link(next_page=None, last_page=None, user_id=1):
    base = f"https://api.github.com/user/{user_id}/starred?per_page=100"
    parts = []
    if next_page:
        parts.append(f'<{base}&page={next_page}>; rel="next"')
    if last_page:
        parts.append(f'<{base}&page={last_page}>; rel="last"')
    return ", ".join(parts) or None


def page_response(records, next_page=None, last_page=None, remaining=59):
    headers = {
        "x-ratelimit-limit": "60",
        "x-ratelimit-remaining": str(remaining),
        "x-ratelimit-reset": "1700000000",
    }
    link = starred_link(next_page, last_page)
    if link:
        headers["link"] = link
    return mock_response(200, records, headers=headers)
