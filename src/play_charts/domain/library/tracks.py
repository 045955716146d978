"""
Track storage, deduplicated by audio fingerprint.
"""

import sqlite3
from contextlib import closing

from loguru import logger

from play_charts.core.database import WriteOutcome, classify_write_error, count_rows

from .models import TrackDescriptor

# Returned by find_track_id when no track has the fingerprint
TRACK_NOT_FOUND = -1


def upsert_track(conn: sqlite3.Connection, track: TrackDescriptor) -> WriteOutcome:
    """Insert a track unless its fingerprint is already stored.

    Metadata for a fingerprint that already exists is discarded, not merged.

    Returns:
        INSERTED for a new track, DUPLICATE when the fingerprint exists,
        FAILED for any other insert error (logged)
    """
    try:
        conn.execute(
            """
            INSERT INTO tracks (artist, name, genre, bpm, key, length, audio_id)
            VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
            (
                track.artist,
                track.title,
                track.genre,
                track.bpm,
                track.key,
                track.length,
                track.audio_id,
            ),
        )
    except sqlite3.Error as e:
        outcome = classify_write_error(e)
        if outcome is WriteOutcome.DUPLICATE:
            logger.debug(f"Track {track.audio_id} already stored")
        else:
            logger.error(f"Error inserting track {track.audio_id}: {e}")
        return outcome

    return WriteOutcome.INSERTED


def find_track_id(conn: sqlite3.Connection, audio_id: str) -> int:
    """Look up the track id for a fingerprint, or TRACK_NOT_FOUND."""
    try:
        with closing(
            conn.execute("SELECT id FROM tracks WHERE audio_id = ?", (audio_id,))
        ) as cursor:
            row = cursor.fetchone()
    except sqlite3.Error as e:
        logger.error(f"Unable to look up track {audio_id}: {e}")
        return TRACK_NOT_FOUND

    return row["id"] if row else TRACK_NOT_FOUND


def count_tracks(conn: sqlite3.Connection) -> int:
    """Number of distinct tracks stored, or -1 if unknown."""
    return count_rows(conn, "tracks")
