"""Shared test fixtures for the site engine."""

import sys
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.config import settings
from src.dashboard.fetcher import SWRCache


class FakeFetcher:
    """Records fetched keys and replays canned responses or errors."""

    def __init__(self, responses: dict | None = None):
        self.responses = responses or {}
        self.calls: list[str] = []

    async def fetch(self, key: str):
        self.calls.append(key)
        value = self.responses[key]
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    """A fetcher with typical metrics API responses."""
    return FakeFetcher({
        "/api/views": {"total": 1234},
        "/api/github": {"stars": 321, "followers": 45},
        "/api/gumroad": {"sales": 1234},
        "/api/subscribers": {"count": 87},
    })


@pytest.fixture
def data_cache(fake_fetcher) -> SWRCache:
    """Data-fetching hook backed by the fake fetcher."""
    return SWRCache(fake_fetcher)


@pytest.fixture
def newsletter_disabled(monkeypatch):
    """Pin the newsletter switch off regardless of local config."""
    monkeypatch.setattr(settings.metrics, "newsletter_enabled", False)
