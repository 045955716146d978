"""
Chart queries over play history.

A chart is the most played tracks in a window (a year, or a month of a year),
ordered by play count, highest first. Equal counts are ordered by artist name,
then by track id.
"""

import sqlite3
from contextlib import closing
from typing import Any, Sequence

from loguru import logger

from .models import ChartEntry

YEAR_CHART_LIMIT = 15
MONTH_CHART_LIMIT = 10

_CHART_QUERY = """
    SELECT
        t.artist,
        t.name AS title,
        t.genre,
        t.bpm,
        t."key" AS "key",
        t.length,
        COUNT(p.track_id) AS total
    FROM plays p
    JOIN tracks t ON p.track_id = t.id
    WHERE {window}
    GROUP BY p.track_id
    ORDER BY total DESC, t.artist ASC, t.id ASC
    LIMIT ?
"""


def _find_chart_entries(
    conn: sqlite3.Connection, window: str, params: Sequence[Any]
) -> list[ChartEntry]:
    """Run the chart query for a WHERE clause; [] if it fails."""
    query = _CHART_QUERY.format(window=window)
    try:
        with closing(conn.execute(query, tuple(params))) as cursor:
            rows = cursor.fetchall()
    except sqlite3.Error as e:
        logger.error(f"Unable to execute chart query ({window}, {params}): {e}")
        return []

    return [
        ChartEntry(
            artist=row["artist"],
            title=row["title"],
            genre=row["genre"],
            bpm=row["bpm"],
            key=row["key"],
            length=row["length"],
            count=row["total"],
        )
        for row in rows
    ]


def query_by_year(
    conn: sqlite3.Connection, year: int, limit: int = YEAR_CHART_LIMIT
) -> list[ChartEntry]:
    """Top tracks played in a year."""
    return _find_chart_entries(conn, "p.year = ?", (year, limit))


def query_by_year_and_month(
    conn: sqlite3.Connection, year: int, month: int, limit: int = MONTH_CHART_LIMIT
) -> list[ChartEntry]:
    """Top tracks played in one month of a year."""
    return _find_chart_entries(
        conn, "p.year = ? AND p.month = ?", (year, month, limit)
    )
