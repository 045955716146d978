"""
Play history record shapes.

These are the two records produced per playback event by the session log
parser: what was played, and when.
"""

from typing import NamedTuple


class TrackDescriptor(NamedTuple):
    """Track metadata as seen in a session log entry.

    audio_id is the audio fingerprint and the only deduplication key; the
    other fields are kept from the first entry seen for a fingerprint.
    """
    artist: str
    title: str
    genre: str
    bpm: int
    key: str  # Musical key (e.g., "Am", "8A")
    length: int  # Whole seconds
    audio_id: str


class PlayDescriptor(NamedTuple):
    """When a track was played, split into calendar components."""
    year: int
    month: int
    day: int
    hour: int
    minute: int
