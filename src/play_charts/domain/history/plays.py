"""
Play history recording.

Each play is stored as one row with its calendar components split out
(year, month, day, hour, minute) so charts can filter on year and month
directly.
"""

import sqlite3
from dataclasses import dataclass
from typing import Iterable

from loguru import logger

from play_charts.core.database import WriteOutcome, count_rows, transaction
from play_charts.domain.library.models import PlayDescriptor, TrackDescriptor
from play_charts.domain.library.tracks import (
    TRACK_NOT_FOUND,
    find_track_id,
    upsert_track,
)


@dataclass(frozen=True)
class ImportResult:
    """Outcome of importing one (track, play) record."""

    track_outcome: WriteOutcome
    track_id: int  # TRACK_NOT_FOUND if the track could not be resolved
    play_recorded: bool


@dataclass
class ImportSummary:
    """Running totals for a batch import."""

    new_tracks: int = 0
    duplicate_tracks: int = 0
    failed_tracks: int = 0
    recorded_plays: int = 0
    skipped_plays: int = 0

    def add(self, result: ImportResult) -> None:
        if result.track_outcome is WriteOutcome.INSERTED:
            self.new_tracks += 1
        elif result.track_outcome is WriteOutcome.DUPLICATE:
            self.duplicate_tracks += 1
        else:
            self.failed_tracks += 1

        if result.play_recorded:
            self.recorded_plays += 1
        else:
            self.skipped_plays += 1


def record_play(
    conn: sqlite3.Connection,
    track_id: int,
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
) -> bool:
    """Append one play for track_id.

    Time components are stored as given; callers supply valid calendar values.

    Returns:
        True if the play was stored, False if the insert failed (logged)
    """
    try:
        conn.execute(
            """
            INSERT INTO plays (track_id, year, month, day, hour, minute)
            VALUES (?, ?, ?, ?, ?, ?)
        """,
            (track_id, year, month, day, hour, minute),
        )
    except sqlite3.Error as e:
        logger.error(f"Error recording play of track {track_id}: {e}")
        return False
    return True


def count_plays(conn: sqlite3.Connection) -> int:
    """Number of plays stored, or -1 if unknown."""
    return count_rows(conn, "plays")


def import_play(
    conn: sqlite3.Connection, track: TrackDescriptor, play: PlayDescriptor
) -> ImportResult:
    """Store the track (if new) and record the play against it.

    The upsert, lookup, and insert run in one transaction so the lookup always
    sees the track it just inserted. A play whose track cannot be resolved is
    not recorded.
    """
    try:
        with transaction(conn):
            outcome = upsert_track(conn, track)
            track_id = find_track_id(conn, track.audio_id)
            if track_id == TRACK_NOT_FOUND:
                logger.warning(
                    f"Skipping play at {play.year}-{play.month:02d}-{play.day:02d}: "
                    f"track {track.audio_id} is not stored"
                )
                return ImportResult(outcome, track_id, False)

            recorded = record_play(
                conn,
                track_id,
                play.year,
                play.month,
                play.day,
                play.hour,
                play.minute,
            )
            return ImportResult(outcome, track_id, recorded)
    except sqlite3.Error as e:
        logger.error(f"Error importing play of track {track.audio_id}: {e}")
        return ImportResult(WriteOutcome.FAILED, TRACK_NOT_FOUND, False)


def import_plays(
    conn: sqlite3.Connection,
    records: Iterable[tuple[TrackDescriptor, PlayDescriptor]],
) -> ImportSummary:
    """Import (track, play) records in order, one transaction per record."""
    summary = ImportSummary()
    for track, play in records:
        summary.add(import_play(conn, track, play))

    logger.info(
        f"Imported {summary.recorded_plays} plays "
        f"({summary.new_tracks} new tracks, {summary.duplicate_tracks} repeats, "
        f"{summary.skipped_plays} skipped)"
    )
    return summary
