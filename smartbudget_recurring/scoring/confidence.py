"""Cadence selection and the confidence formula."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from smartbudget_recurring.config.profiles import SEMI_MONTHLY, CadenceWindow, ScoreWeights

from .day_of_month import semi_monthly_score
from .gaps import gap_window_score


@dataclass(frozen=True)
class CadenceFit:
    name: str
    score: float


UNKNOWN_CADENCE = CadenceFit("Unknown", 0.0)


def best_cadence(
    gaps: Sequence[int],
    days: Sequence[int],
    cadences: Sequence[CadenceWindow],
    semi_monthly: bool = False,
) -> CadenceFit:
    """Pick the cadence whose gap window fits best.

    Fixed windows are compared in table order and only a strictly better
    score replaces the current pick. SemiMonthly is checked last and also
    has to be strictly better, so evenly spaced 14-day deposits stay
    "Biweekly" and first-of-month deposits stay "Monthly".
    """
    if not gaps:
        return UNKNOWN_CADENCE

    best = UNKNOWN_CADENCE
    for window in cadences:
        score = gap_window_score(gaps, window.min_days, window.max_days)
        if best is UNKNOWN_CADENCE or score > best.score:
            best = CadenceFit(window.name, score)

    if semi_monthly:
        score = semi_monthly_score(gaps, days)
        if best is UNKNOWN_CADENCE or score > best.score:
            best = CadenceFit(SEMI_MONTHLY, score)

    return best


def frequency_score(occurrences: int, cap: int) -> float:
    return min(occurrences / cap, 1.0)


def text_hint_bonus(
    token_sets: Iterable[frozenset[str]], hints: Sequence[tuple[str, float]]
) -> float:
    """Sum of hint bonuses whose token shows up in any item."""
    seen: set[str] = set()
    for tokens in token_sets:
        seen.update(tokens)
    return sum(bonus for token, bonus in hints if token in seen)


def combine_confidence(
    weights: ScoreWeights,
    *,
    cadence: float,
    day_of_month: float,
    amount: float,
    frequency: float,
    hints: float,
) -> float:
    """Weighted sum of the signals, clamped to [0, 1]."""
    confidence = (
        weights.cadence * cadence
        + weights.day_of_month * day_of_month
        + weights.amount * amount
        + weights.frequency * frequency
        + hints
    )
    return min(max(confidence, 0.0), 1.0)
