"""
Library domain module.

Stores distinct tracks keyed by audio fingerprint.
"""

from .models import PlayDescriptor, TrackDescriptor
from .tracks import TRACK_NOT_FOUND, count_tracks, find_track_id, upsert_track

__all__ = [
    "PlayDescriptor",
    "TrackDescriptor",
    "TRACK_NOT_FOUND",
    "count_tracks",
    "find_track_id",
    "upsert_track",
]
