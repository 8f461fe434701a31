"""Day-gap analysis between consecutive occurrences."""

from collections.abc import Iterable, Sequence
from datetime import date

import numpy as np

from smartbudget_recurring.config.profiles import (
    MONTHLY,
    PAYMENT_LIKE_TITLE_MARKERS,
    PAYMENT_LIKE_TOKENS,
)


def compute_day_gaps(dates_asc: Sequence[date]) -> list[int]:
    """Day differences between consecutive dates (empty for fewer than two)."""
    if len(dates_asc) < 2:
        return []
    ordinals = np.fromiter((d.toordinal() for d in dates_asc), dtype=np.int64)
    return [int(g) for g in np.diff(ordinals)]


def gap_window_score(gaps: Sequence[int], min_days: int, max_days: int) -> float:
    """Fraction of gaps inside ``[min_days, max_days]``."""
    if not gaps:
        return 0.0
    arr = np.asarray(gaps)
    hits = np.count_nonzero((arr >= min_days) & (arr <= max_days))
    return float(hits) / len(gaps)


def monthly_gap_score(dates: Iterable[date]) -> float:
    """Plain monthly fit (28-35 days), independent of any widening."""
    gaps = compute_day_gaps(sorted(dates))
    return gap_window_score(gaps, MONTHLY.min_days, MONTHLY.max_days)


def is_payment_like(token_sets: Iterable[frozenset[str]], titles: Iterable[str]) -> bool:
    """Whether a series looks like an ACH / e-payment style charge.

    Two checks are unioned: token membership and a raw substring search on
    the uppercased title. Most of the token markers are also stop words, so
    in practice the title search carries the ACH/PMT cases.
    """
    # TODO: reconcile the token and substring checks once real statements
    # show which one misfires ("ACH" also matches "COACH").
    if any(tokens & PAYMENT_LIKE_TOKENS for tokens in token_sets):
        return True
    return any(
        marker in title.upper() for title in titles for marker in PAYMENT_LIKE_TITLE_MARKERS
    )
