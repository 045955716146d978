"""
Year/month chart report assembly.
"""

import sqlite3

from loguru import logger

from play_charts.core.config import ChartsConfig
from play_charts.domain.history.plays import count_plays
from play_charts.domain.library.tracks import count_tracks

from .models import MonthSection, Report, YearSection
from .queries import (
    MONTH_CHART_LIMIT,
    YEAR_CHART_LIMIT,
    query_by_year,
    query_by_year_and_month,
)

DEFAULT_MIN_YEAR = 2011
DEFAULT_MAX_YEAR = 2020


def build_report(
    conn: sqlite3.Connection,
    min_year: int = DEFAULT_MIN_YEAR,
    max_year: int = DEFAULT_MAX_YEAR,
    year_limit: int = YEAR_CHART_LIMIT,
    month_limit: int = MONTH_CHART_LIMIT,
) -> Report:
    """Build the chart report for years max_year down to min_year.

    Years without plays are left out, and their months are never queried.
    Within a year, months run 12 down to 1 and empty months are left out.

    Args:
        conn: Open store connection
        min_year: Oldest year to include
        max_year: Newest year to include
        year_limit: Entries per yearly chart
        month_limit: Entries per monthly chart

    Returns:
        Report with totals (-1 where a count failed) and year sections
    """
    if min_year > max_year:
        raise ValueError(f"min_year ({min_year}) is after max_year ({max_year})")

    track_count = count_tracks(conn)
    play_count = count_plays(conn)

    by_year = []
    for year in range(max_year, min_year - 1, -1):
        yearly_charts = query_by_year(conn, year, limit=year_limit)
        if not yearly_charts:
            continue

        by_month = []
        for month in range(12, 0, -1):
            monthly_charts = query_by_year_and_month(
                conn, year, month, limit=month_limit
            )
            if monthly_charts:
                by_month.append(MonthSection(month=month, charts=monthly_charts))

        by_year.append(YearSection(year=year, charts=yearly_charts, by_month=by_month))

    report = Report(
        track_count=track_count,
        play_count=play_count,
        by_year=by_year,
    )
    logger.debug(
        f"Built report for {max_year}-{min_year}: {len(by_year)} years, "
        f"{report.track_count} tracks, {report.play_count} plays"
    )
    return report


def build_report_from_config(conn: sqlite3.Connection, charts: ChartsConfig) -> Report:
    """Build the report using the window and limits from [charts]."""
    return build_report(
        conn,
        min_year=charts.min_year,
        max_year=charts.max_year,
        year_limit=charts.year_limit,
        month_limit=charts.month_limit,
    )
