"""Auto-pay and recurring-deposit detectors."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from smartbudget_recurring.config.profiles import AUTOPAY_PROFILE, DEPOSIT_PROFILE
from smartbudget_recurring.data_models import (
    DetectedAutoPay,
    DetectedRecurringDeposit,
    TransactionRecord,
)
from smartbudget_recurring.pipeline import SeriesCandidate, detect_series, rank_key

CONFIDENCE_DECIMALS = 3


def _average_cents(amounts: Sequence[int]) -> int:
    """Mean amount rounded half away from zero."""
    mean = Decimal(sum(amounts)) / Decimal(len(amounts))
    return int(mean.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _summary_fields(candidate: SeriesCandidate) -> dict:
    return {
        "series_key": candidate.series_key,
        "display_name": candidate.display_name,
        "count": candidate.count,
        "avg_amount_cents": _average_cents(candidate.amounts),
        "cadence": candidate.cadence,
        "confidence": round(candidate.confidence, CONFIDENCE_DECIMALS),
        "first_seen": candidate.items[0].date,
        "last_seen": candidate.items[-1].date,
    }


def detect_autopay(
    transactions: Sequence[TransactionRecord],
    min_occurrences: int = 4,
    min_confidence: float = 0.75,
) -> list[DetectedAutoPay]:
    """Detect monthly auto-pay series.

    Catches cases like "HOME DEPOT AUTO PYMT" next to "HOME DEPOT ONLINE
    PMT", or a "CITY PHX WATER PAYMENT" that never says AUTO but posts
    around the 28th-1st every month.

    Args:
        transactions: Records of one account, in any order
        min_occurrences: Minimum series length
        min_confidence: Minimum confidence (0..1)

    Returns:
        Detected series ordered by confidence, count, then display name
    """
    candidates = detect_series(transactions, AUTOPAY_PROFILE, min_occurrences, min_confidence)
    results = [
        DetectedAutoPay(merchant_key=c.merchant_key, **_summary_fields(c)) for c in candidates
    ]
    results.sort(key=lambda r: rank_key(r.confidence, r.count, r.display_name, r.series_key))
    return results


def detect_recurring_deposits(
    transactions: Sequence[TransactionRecord],
    min_occurrences: int = 4,
    min_confidence: float = 0.75,
) -> list[DetectedRecurringDeposit]:
    """Detect recurring deposits such as paychecks.

    Only positive amounts are considered. Cadence is one of Weekly,
    Biweekly, Every3Weeks, Every4Weeks, Monthly or SemiMonthly.
    """
    candidates = detect_series(transactions, DEPOSIT_PROFILE, min_occurrences, min_confidence)
    results = [
        DetectedRecurringDeposit(employer_key=c.merchant_key, **_summary_fields(c))
        for c in candidates
    ]
    results.sort(key=lambda r: rank_key(r.confidence, r.count, r.display_name, r.series_key))
    return results
