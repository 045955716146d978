"""
Chart and report data models.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ChartEntry:
    """One track's play count within a chart window."""

    artist: str
    title: str
    genre: str
    bpm: int
    key: str
    length: int  # Whole seconds
    count: int

    @property
    def length_display(self) -> str:
        """Track length as minutes and zero-padded seconds, e.g. '3m:05s'."""
        length = self.length or 0
        return f"{length // 60}m:{length % 60:02d}s"

    def to_dict(self) -> dict[str, Any]:
        return {
            "artist": self.artist,
            "title": self.title,
            "genre": self.genre,
            "bpm": self.bpm,
            "key": self.key,
            "length": self.length,
            "count": self.count,
        }


@dataclass(frozen=True)
class MonthSection:
    """Monthly chart within a year."""

    month: int
    charts: list[ChartEntry]

    def to_dict(self) -> dict[str, Any]:
        return {
            "month": self.month,
            "charts": [entry.to_dict() for entry in self.charts],
        }


@dataclass(frozen=True)
class YearSection:
    """Yearly chart plus its non-empty monthly charts, newest month first."""

    year: int
    charts: list[ChartEntry]
    by_month: list[MonthSection] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "charts": [entry.to_dict() for entry in self.charts],
            "byMonth": [section.to_dict() for section in self.by_month],
        }


@dataclass(frozen=True)
class Report:
    """Full chart report: totals plus non-empty years, newest first."""

    track_count: int
    play_count: int
    by_year: list[YearSection] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Plain nested dict, safe to pass to json.dumps."""
        return {
            "trackCount": self.track_count,
            "playCount": self.play_count,
            "byYear": [section.to_dict() for section in self.by_year],
        }
