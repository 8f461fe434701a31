"""Cadence, day-of-month, amount and confidence scoring."""

from .amounts import amount_consistency_score, amounts_similar, median_abs_amount
from .confidence import (
    CadenceFit,
    best_cadence,
    combine_confidence,
    frequency_score,
    text_hint_bonus,
)
from .day_of_month import (
    allowed_days,
    day_window_overlap,
    dominant_day_score,
    effective_day_score,
    month_boundary_score,
    semi_monthly_score,
)
from .gaps import compute_day_gaps, gap_window_score, is_payment_like, monthly_gap_score

__all__ = [
    "CadenceFit",
    "allowed_days",
    "amount_consistency_score",
    "amounts_similar",
    "best_cadence",
    "combine_confidence",
    "compute_day_gaps",
    "day_window_overlap",
    "dominant_day_score",
    "effective_day_score",
    "frequency_score",
    "gap_window_score",
    "is_payment_like",
    "median_abs_amount",
    "month_boundary_score",
    "monthly_gap_score",
    "semi_monthly_score",
    "text_hint_bonus",
]
