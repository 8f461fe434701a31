"""Per-merchant deduplication and final ordering."""

import logging
from collections import defaultdict
from collections.abc import Sequence

from smartbudget_recurring.preprocessing import ignore_case_key

from .candidate import SeriesCandidate

logger = logging.getLogger(__name__)

# A weaker sibling this far below the best one, with fewer hits, is an extra
EXTRA_CONFIDENCE_GAP = 0.20
# A sibling must clear min_confidence by this much to stand on its own
SIBLING_CONFIDENCE_MARGIN = 0.10


def dedupe_by_merchant(
    candidates: Sequence[SeriesCandidate], min_confidence: float
) -> list[SeriesCandidate]:
    """Keep the strongest series per merchant and only strong siblings.

    This keeps "ONLINE PMT" extras from being reported as auto-pay next to
    the real "AUTO PYMT" series. A sibling that is neither an obvious extra
    nor strong enough on its own is dropped as well.
    """
    by_merchant: dict[str, list[SeriesCandidate]] = defaultdict(list)
    for candidate in candidates:
        by_merchant[candidate.merchant_key].append(candidate)

    kept: list[SeriesCandidate] = []
    for merchant_key, group in by_merchant.items():
        if len(group) == 1:
            kept.extend(group)
            continue

        ordered = sorted(group, key=lambda c: -c.confidence)
        best, others = ordered[0], ordered[1:]
        kept.append(best)

        for other in others:
            is_extra = (
                best.confidence - other.confidence >= EXTRA_CONFIDENCE_GAP
                and other.count < best.count
            )
            if not is_extra and other.confidence >= min_confidence + SIBLING_CONFIDENCE_MARGIN:
                kept.append(other)
            else:
                logger.debug(
                    "Dropping sibling series %r of merchant %r (confidence %.3f vs %.3f)",
                    other.series_key, merchant_key, other.confidence, best.confidence,
                )

    return kept


def rank_key(confidence: float, count: int, display_name: str, series_key: str) -> tuple:
    """Sort key: confidence desc, count desc, then names ascending."""
    return (-confidence, -count, ignore_case_key(display_name), series_key)
