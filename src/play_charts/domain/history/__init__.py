"""
Play history domain module.
"""

from .plays import (
    ImportResult,
    ImportSummary,
    count_plays,
    import_play,
    import_plays,
    record_play,
)

__all__ = [
    "ImportResult",
    "ImportSummary",
    "count_plays",
    "import_play",
    "import_plays",
    "record_play",
]
