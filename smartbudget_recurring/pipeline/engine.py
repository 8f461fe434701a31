"""Generic recurring-series detection pipeline.

Phases:
1. Tokenize titles and build merchant/series keys
2. Group items by series key
3. Score each group against the profile's cadences
4. Merge drifted series (if the profile asks for it)
5. Apply the confidence threshold
6. Deduplicate per merchant (if the profile asks for it)

Ranking and conversion to output models happen in the detectors.
"""

import logging
from collections import defaultdict
from collections.abc import Sequence

from smartbudget_recurring.config.profiles import (
    DEFAULT_DOM_TOLERANCE,
    PAYMENT_LIKE_DOM_TOLERANCE,
    PAYMENT_LIKE_MONTHLY,
    CadenceWindow,
    DetectionProfile,
)
from smartbudget_recurring.data_models import TransactionRecord
from smartbudget_recurring.preprocessing import (
    build_display_name,
    build_merchant_key,
    build_series_key,
    tokenize,
)
from smartbudget_recurring.scoring import (
    amount_consistency_score,
    best_cadence,
    combine_confidence,
    compute_day_gaps,
    effective_day_score,
    frequency_score,
    is_payment_like,
    text_hint_bonus,
)

from .candidate import Item, SeriesCandidate, sort_by_date
from .merger import merge_drifted_series
from .ranking import dedupe_by_merchant

logger = logging.getLogger(__name__)


def validate_thresholds(min_occurrences: int, min_confidence: float) -> None:
    if min_occurrences < 1:
        raise ValueError(f"min_occurrences must be >= 1, got {min_occurrences}")
    if not 0.0 <= min_confidence <= 1.0:
        raise ValueError(f"min_confidence must be within [0, 1], got {min_confidence}")


def build_items(
    transactions: Sequence[TransactionRecord], profile: DetectionProfile
) -> list[Item]:
    """Turn records into keyed items.

    Titles made only of noise (stop words, digits) still form an item under
    the empty merchant key, so they group like any other title.
    """
    items: list[Item] = []
    for txn in transactions:
        if profile.direction == "deposits" and txn.amount_cents <= 0:
            continue
        if not txn.title.strip():
            continue

        tokens = tokenize(txn.title, profile.stop_words)
        merchant_key = build_merchant_key(tokens, profile.key_excluded_words)
        series_key = build_series_key(merchant_key, tokens, profile.qualifier_words)
        items.append(Item(txn=txn, tokens=tokens, merchant_key=merchant_key, series_key=series_key))

    return items


def group_by_series(items: Sequence[Item]) -> list[tuple[Item, ...]]:
    """Group items by series key, each group sorted by date."""
    groups: dict[str, list[Item]] = defaultdict(list)
    for item in items:
        groups[item.series_key].append(item)
    return [sort_by_date(group) for group in groups.values()]


def score_series(
    series: tuple[Item, ...],
    profile: DetectionProfile,
    min_occurrences: int,
    min_confidence: float,
) -> SeriesCandidate | None:
    """Score one date-ordered group, or return None if it is rejected."""
    if len(series) < min_occurrences:
        return None

    if profile.min_positive_share > 0:
        positives = sum(1 for i in series if i.txn.amount_cents > 0)
        if positives < len(series) * profile.min_positive_share:
            return None

    gaps = compute_day_gaps([i.date for i in series])
    if not gaps:
        return None

    days = [i.day for i in series]
    token_sets = [i.tokens for i in series]

    cadences: Sequence[CadenceWindow] = profile.cadences
    dom_tolerance = DEFAULT_DOM_TOLERANCE
    if profile.widen_payment_like and is_payment_like(token_sets, (i.txn.title for i in series)):
        cadences = [PAYMENT_LIKE_MONTHLY if c.name == PAYMENT_LIKE_MONTHLY.name else c for c in cadences]
        dom_tolerance = PAYMENT_LIKE_DOM_TOLERANCE

    fit = best_cadence(gaps, days, cadences, semi_monthly=profile.semi_monthly)
    if fit.score < profile.min_cadence_score:
        return None

    weights = profile.weights
    confidence = combine_confidence(
        weights,
        cadence=fit.score,
        day_of_month=effective_day_score(days, dom_tolerance) if weights.day_of_month else 0.0,
        amount=amount_consistency_score([i.txn.amount_cents for i in series]) if weights.amount else 0.0,
        frequency=frequency_score(len(series), weights.frequency_cap),
        hints=text_hint_bonus(token_sets, weights.text_hints),
    )
    if confidence < min_confidence:
        return None

    return SeriesCandidate(
        merchant_key=series[0].merchant_key,
        series_key=series[0].series_key,
        display_name=build_display_name(
            [i.txn.title for i in series], profile.display_tie_break
        ),
        items=series,
        confidence=confidence,
        cadence=fit.name,
    )


def detect_series(
    transactions: Sequence[TransactionRecord],
    profile: DetectionProfile,
    min_occurrences: int = 4,
    min_confidence: float = 0.75,
) -> list[SeriesCandidate]:
    """Run the pipeline for one profile and return the surviving candidates."""
    validate_thresholds(min_occurrences, min_confidence)
    if not transactions:
        return []

    items = build_items(transactions, profile)
    groups = group_by_series(items)
    logger.debug(
        "[%s] %d items in %d series from %d transactions",
        profile.name, len(items), len(groups), len(transactions),
    )

    # Merging sees every scored series, the threshold applies to merged ones
    score_floor = 0.0 if profile.merge_drifted else min_confidence
    candidates = [
        candidate
        for series in groups
        if (candidate := score_series(series, profile, min_occurrences, score_floor)) is not None
    ]
    logger.debug("[%s] %d series passed scoring", profile.name, len(candidates))

    if profile.merge_drifted:
        candidates = merge_drifted_series(candidates)
        candidates = [c for c in candidates if c.confidence >= min_confidence]
        logger.debug("[%s] %d series after merging", profile.name, len(candidates))

    if profile.dedupe_by_merchant:
        candidates = dedupe_by_merchant(candidates, min_confidence)

    logger.info(
        "[%s] detected %d recurring series in %d transactions",
        profile.name, len(candidates), len(transactions),
    )
    return candidates
