"""Merging of series whose titles drifted over time.

An issuer renaming a line item ("NISSAN" -> "NISSAN RET") produces two
series keys for one real series. The merger collapses such pairs when all
five gates agree:

1. both groups move money in the same direction
2. both look monthly on their own
3. their median amounts are close
4. their day-of-month windows overlap
5. their token sets are similar
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from smartbudget_recurring.preprocessing import ignore_case_key
from smartbudget_recurring.scoring import (
    amounts_similar,
    day_window_overlap,
    median_abs_amount,
    monthly_gap_score,
)

from .candidate import SeriesCandidate, sort_by_date

logger = logging.getLogger(__name__)

MOSTLY_SAME_SIGN = 0.80
MIN_MONTHLY_GAP_SCORE = 0.60
MIN_DAY_WINDOW_OVERLAP = 0.50
MIN_TEXT_SIMILARITY = 0.35


def jaccard(a: Iterable[str], b: Iterable[str]) -> float:
    """Jaccard index of two token sets. Two empty sets are identical."""
    a = set(a)
    b = set(b)
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


def _mostly_negative(candidate: SeriesCandidate) -> bool:
    negatives = sum(1 for amount in candidate.amounts if amount < 0)
    return negatives >= candidate.count * MOSTLY_SAME_SIGN


def can_merge(a: SeriesCandidate, b: SeriesCandidate) -> bool:
    """Whether ``a`` and ``b`` pass every merge gate."""
    if _mostly_negative(a) != _mostly_negative(b):
        return False

    if monthly_gap_score(a.dates) < MIN_MONTHLY_GAP_SCORE:
        return False
    if monthly_gap_score(b.dates) < MIN_MONTHLY_GAP_SCORE:
        return False

    if not amounts_similar(median_abs_amount(a.amounts), median_abs_amount(b.amounts)):
        return False

    if day_window_overlap(a.days, b.days) < MIN_DAY_WINDOW_OVERLAP:
        return False

    return jaccard(a.token_union, b.token_union) >= MIN_TEXT_SIMILARITY


def merge_pair(a: SeriesCandidate, b: SeriesCandidate) -> SeriesCandidate:
    """Collapse ``b`` into ``a``. Longer names win, ties keep ``a``'s."""
    merchant_key = a.merchant_key if len(a.merchant_key) >= len(b.merchant_key) else b.merchant_key
    display_name = a.display_name if len(a.display_name) >= len(b.display_name) else b.display_name

    return replace(
        a,
        merchant_key=merchant_key,
        series_key=merchant_key,
        display_name=display_name,
        items=sort_by_date([*a.items, *b.items]),
        confidence=max(a.confidence, b.confidence),
    )


def merge_drifted_series(candidates: Sequence[SeriesCandidate]) -> list[SeriesCandidate]:
    """Greedily merge candidates until no pair passes the gates.

    Candidates live in an arena of slots. Each pass scans live (i, j) pairs
    in order, merges the first passing pair into slot i, retires slot j and
    starts over. Sorting by series key first keeps the result deterministic.
    """
    arena: list[SeriesCandidate | None] = sorted(
        candidates, key=lambda c: (c.series_key, ignore_case_key(c.display_name))
    )

    merges = 0
    while True:
        pair = _first_mergeable_pair(arena)
        if pair is None:
            break
        i, j, a, b = pair
        logger.debug("Merging series %r into %r", b.series_key, a.series_key)
        arena[i] = merge_pair(a, b)
        arena[j] = None
        merges += 1

    if merges:
        logger.debug("Merged %d drifted series pair(s)", merges)

    return [c for c in arena if c is not None]


def _first_mergeable_pair(
    arena: Sequence[SeriesCandidate | None],
) -> tuple[int, int, SeriesCandidate, SeriesCandidate] | None:
    live = [(idx, c) for idx, c in enumerate(arena) if c is not None]
    for pos, (i, a) in enumerate(live):
        for j, b in live[pos + 1 :]:
            if can_merge(a, b):
                return i, j, a, b
    return None
