"""
Charts domain module.

Ranks tracks by play count per year and per month, and assembles the
nested year/month report.
"""

from .models import ChartEntry, MonthSection, Report, YearSection
from .queries import (
    MONTH_CHART_LIMIT,
    YEAR_CHART_LIMIT,
    query_by_year,
    query_by_year_and_month,
)
from .rollup import (
    DEFAULT_MAX_YEAR,
    DEFAULT_MIN_YEAR,
    build_report,
    build_report_from_config,
)

__all__ = [
    "ChartEntry",
    "MonthSection",
    "Report",
    "YearSection",
    "MONTH_CHART_LIMIT",
    "YEAR_CHART_LIMIT",
    "query_by_year",
    "query_by_year_and_month",
    "DEFAULT_MAX_YEAR",
    "DEFAULT_MIN_YEAR",
    "build_report",
    "build_report_from_config",
]
