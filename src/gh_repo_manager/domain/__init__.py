"""Domain data structures."""

from .models import (
    DEFAULT_FORMAT,
    DEFAULT_SORT,
    DEFAULT_VISIBILITY,
    FORMATS,
    SORT_FIELDS,
    VISIBILITIES,
    CloneStats,
    RepoRecord,
    RunOptions,
)

__all__ = [
    "DEFAULT_FORMAT",
    "DEFAULT_SORT",
    "DEFAULT_VISIBILITY",
    "FORMATS",
    "SORT_FIELDS",
    "VISIBILITIES",
    "CloneStats",
    "RepoRecord",
    "RunOptions",
]
