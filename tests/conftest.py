"""
Shared fixtures for RSS Bot tests.

Provides common test fixtures for use across all test modules.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from rssbot.config import AppConfig, FeedConfig
from rssbot.entry import Entry, FeedDocument
from rssbot.tracker import SeenTracker


# Path to test fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def sample_rss_path(fixtures_dir: Path) -> Path:
    """Return path to sample RSS feed file."""
    return fixtures_dir / "sample_rss.xml"


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    """Return path to sample config file."""
    return fixtures_dir / "sample_config.yaml"


@pytest.fixture
def sample_rss_content(sample_rss_path: Path) -> str:
    """Return contents of sample RSS feed."""
    return sample_rss_path.read_text()


@pytest.fixture
def minimal_config_dict() -> dict[str, Any]:
    """
    Create a minimal valid configuration dictionary.

    Returns
    -------
    dict
        Configuration dictionary that can be used to create AppConfig.
    """
    return {
        "interval_minutes": 5,
        "feeds": [
            {
                "name": "Test Feed",
                "url": "https://example.com/feed.xml",
            }
        ],
    }


@pytest.fixture
def two_feed_config() -> AppConfig:
    """Create a configuration with two feeds."""
    return AppConfig(
        interval_minutes=1,
        feeds=[
            FeedConfig(name="Feed A", url="https://a.example.com/rss"),
            FeedConfig(name="Feed B", url="https://b.example.com/rss"),
        ],
    )


@pytest.fixture
def tracker() -> SeenTracker:
    """Create an empty tracker."""
    return SeenTracker()


@pytest.fixture
def mock_parser() -> MagicMock:
    """
    Create a mock feed parser.

    Returns
    -------
    MagicMock
        A parser whose fetch returns an empty document by default.
    """
    parser = MagicMock()
    parser.fetch = AsyncMock(return_value=FeedDocument())
    parser.close = AsyncMock()
    return parser


@pytest.fixture
def mock_notifier() -> MagicMock:
    """Create a mock notifier that accepts every item."""
    notifier = MagicMock()
    notifier.send_item = AsyncMock(return_value=True)
    notifier.close = AsyncMock()
    return notifier


@pytest.fixture
def feedparser_entry() -> dict[str, Any]:
    """
    Create a sample feedparser entry dictionary.

    Returns
    -------
    dict
        A dictionary mimicking feedparser entry structure.
    """
    return {
        "title": "Test Entry",
        "link": "https://example.com/entry",
        "id": "guid-123",
        "summary": "This is a test summary",
        "published": "Mon, 01 Jan 2024 12:00:00 GMT",
    }


@pytest.fixture
def make_document() -> Callable[..., FeedDocument]:
    """Return a factory building a feed document with one entry per GUID."""

    def _make(*guids: str) -> FeedDocument:
        return FeedDocument(
            title="Test Feed",
            entries=[
                Entry(title=f"Entry {g}", link=f"https://example.com/{g}", guid=g)
                for g in guids
            ],
        )

    return _make
