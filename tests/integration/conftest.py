"""Shared fixtures for integration tests: real temp dirs, mocked HTTP."""

from unittest.mock import patch

import pytest

from github_stars_exporter.client import StarsClient

from .helpers import make_settings


@pytest.fixture
def cache_dir(tmp_path):
    d = tmp_path / "cache"
    d.mkdir()
    return d


@pytest.fixture
def client(cache_dir):
    with patch("github_stars_exporter.client.get_settings", return_value=make_settings()):
        c = StarsClient(cache_dir=cache_dir)
    return c
