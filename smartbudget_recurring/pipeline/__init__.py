"""Detection pipeline: grouping, scoring, merging and deduplication."""

from .candidate import Item, SeriesCandidate
from .engine import build_items, detect_series, group_by_series, score_series
from .merger import can_merge, jaccard, merge_drifted_series
from .ranking import dedupe_by_merchant, rank_key

__all__ = [
    "Item",
    "SeriesCandidate",
    "build_items",
    "can_merge",
    "dedupe_by_merchant",
    "detect_series",
    "group_by_series",
    "jaccard",
    "merge_drifted_series",
    "rank_key",
    "score_series",
]
