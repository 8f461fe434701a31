"""Amount statistics over a series."""

from collections.abc import Sequence

import numpy as np

# Amounts count as "the same" within five dollars or two percent
AMOUNT_TOLERANCE_CENTS = 500
AMOUNT_TOLERANCE_PCT = 0.02


def median_abs_amount(amounts_cents: Sequence[int]) -> float:
    """Median of absolute amounts (0.0 for an empty series)."""
    if not amounts_cents:
        return 0.0
    return float(np.median(np.abs(np.asarray(amounts_cents, dtype=np.float64))))


def amounts_similar(reference: float, other: float) -> bool:
    """Tight dollars OR tight percent, percent taken against ``reference``.

    A zero reference makes the percent difference 1.0, so only the dollar
    test can pass.
    """
    diff = abs(reference - other)
    diff_pct = 1.0 if reference == 0 else diff / reference
    return diff <= AMOUNT_TOLERANCE_CENTS or diff_pct <= AMOUNT_TOLERANCE_PCT


def amount_consistency_score(amounts_cents: Sequence[int]) -> float:
    """Fraction of amounts close to the (upper) median amount.

    Needs at least three amounts and a positive median, otherwise 0.0.
    """
    if len(amounts_cents) < 3:
        return 0.0

    ordered = np.sort(np.asarray(amounts_cents, dtype=np.int64))
    median = int(ordered[len(ordered) // 2])
    if median <= 0:
        return 0.0

    diff = np.abs(ordered - median)
    within = (diff <= AMOUNT_TOLERANCE_CENTS) | (diff / median <= AMOUNT_TOLERANCE_PCT)
    return float(np.count_nonzero(within)) / len(ordered)
