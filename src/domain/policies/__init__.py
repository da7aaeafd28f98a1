"""Domain policies package."""

from .search import matches_query
from .sorting import (
    HoldingSortKey,
    SortDirection,
    SortState,
    next_sort_state,
)

__all__ = [
    "matches_query",
    "HoldingSortKey",
    "SortDirection",
    "SortState",
    "next_sort_state",
]
