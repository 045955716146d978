"""Shared fixtures: an isolated data directory and a fresh store."""

import pytest
from loguru import logger

from play_charts.core.database import initialize_store
from play_charts.domain.library.models import PlayDescriptor, TrackDescriptor


@pytest.fixture
def data_home(tmp_path, monkeypatch):
    """Point XDG_DATA_HOME at a temporary directory."""
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    return tmp_path / "play-charts"


@pytest.fixture
def store(data_home):
    """A freshly initialized, empty store connection."""
    conn, ok = initialize_store("test_charts")
    assert ok
    yield conn
    conn.close()


@pytest.fixture
def log_messages():
    """Collect loguru records emitted during the test."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(message.record), level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def make_track():
    """Factory for TrackDescriptors with sensible defaults."""

    def _make_track(audio_id: str, artist: str = "Artist", title: str = "Title", **kwargs):
        fields = {
            "artist": artist,
            "title": title,
            "genre": "House",
            "bpm": 124,
            "key": "8A",
            "length": 300,
            "audio_id": audio_id,
        }
        fields.update(kwargs)
        return TrackDescriptor(**fields)

    return _make_track


@pytest.fixture
def make_play():
    """Factory for PlayDescriptors, defaulting to a March 2015 evening."""

    def _make_play(year=2015, month=3, day=14, hour=22, minute=30):
        return PlayDescriptor(year, month, day, hour, minute)

    return _make_play
