"""Pytest configuration and fixtures."""

import os
from unittest.mock import patch

# Keep test runs from writing ./logs/app.log
os.environ.setdefault("LOG_TO_FILE", "false")

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from app.main import create_app  # noqa: E402
from app.models.srt import CaptionEntry, Track  # noqa: E402
from app.services.track_store import TrackStore  # noqa: E402

# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def fresh_track_store(monkeypatch):
    """Replace the global track store with an empty one for each test."""
    store = TrackStore()
    monkeypatch.setattr("app.api.v1.tracks.track_store", store)
    monkeypatch.setattr("app.api.v1.alignment.track_store", store)
    monkeypatch.setattr("app.api.v1.health.track_store", store)
    return store


@pytest.fixture
def client(fresh_track_store):
    """Create test client without authentication."""
    app = create_app()
    return TestClient(app)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_srt():
    """Sample SRT content for testing."""
    return """1
00:00:01,000 --> 00:00:04,000
Hello world

2
00:00:05,000 --> 00:00:08,000
How are you?"""


@pytest.fixture
def sample_srt_translated():
    """Second track overlapping sample_srt."""
    return """1
00:00:01,200 --> 00:00:03,900
Hola mundo

2
00:00:05,100 --> 00:00:07,800
¿Cómo estás?"""


@pytest.fixture
def truncated_srt():
    """SRT content whose second block has a broken timing line."""
    return "1\n00:00:01,000 --> 00:00:02,000\nHello\n\n2\nNOT-A-TIME\n"


# ============================================================================
# Authentication/Security Fixtures
# ============================================================================


@pytest.fixture
def client_no_auth(fresh_track_store):
    """Client with no API key configured."""
    with patch("app.core.security.settings") as mock_settings:
        mock_settings.api_key = None
        app = create_app()
        yield TestClient(app)


@pytest.fixture
def client_with_auth(fresh_track_store):
    """Client with API key configured (no default headers)."""
    with patch("app.core.security.settings") as mock_settings:
        mock_settings.api_key = "test_secret_key_12345"
        app = create_app()
        yield TestClient(app)


# ============================================================================
# Track Fixtures
# ============================================================================


@pytest.fixture
def make_track():
    """Factory building a track from (start_ms, end_ms, caption) tuples.

    Example:
        make_track("A", (0, 1000, "A1"), (1500, 2000, "A2"))
    """

    def _make_track(name, *spans):
        return Track(
            name=name,
            entries=tuple(
                CaptionEntry(start_time=start, end_time=end, caption=caption)
                for start, end, caption in spans
            ),
        )

    return _make_track
