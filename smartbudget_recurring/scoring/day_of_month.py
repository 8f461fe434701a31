"""Day-of-month clustering scores."""

from collections import Counter
from collections.abc import Sequence

# Bills posted across a month rollover land on 26-31 or 1-4
MONTH_BOUNDARY_START = 26
MONTH_BOUNDARY_END = 4

# Typical twice-monthly pay windows: 1st/15th and 15th/end of month
SEMI_MONTHLY_EARLY = range(1, 7)
SEMI_MONTHLY_MID = range(13, 19)
SEMI_MONTHLY_LATE = range(24, 32)
SEMI_MONTHLY_GAP = (13, 17)

ALLOWED_DAY_TOLERANCE = 2


def dominant_day(days: Sequence[int]) -> int | None:
    """Most frequent day-of-month, ties go to the first one seen."""
    if not days:
        return None
    return Counter(days).most_common(1)[0][0]


def dominant_day_score(days: Sequence[int], tolerance: int) -> float:
    dom = dominant_day(days)
    if dom is None:
        return 0.0
    aligned = sum(1 for d in days if abs(dom - d) <= tolerance)
    return aligned / len(days)


def is_month_boundary(day: int) -> bool:
    return day >= MONTH_BOUNDARY_START or day <= MONTH_BOUNDARY_END


def month_boundary_score(days: Sequence[int]) -> float:
    if not days:
        return 0.0
    return sum(1 for d in days if is_month_boundary(d)) / len(days)


def effective_day_score(days: Sequence[int], tolerance: int) -> float:
    """Best of dominant-day clustering and month-boundary clustering."""
    return max(dominant_day_score(days, tolerance), month_boundary_score(days))


def semi_monthly_score(gaps: Sequence[int], days: Sequence[int]) -> float:
    """Twice-monthly fit: the better of gap rhythm and pay-window clustering."""
    if not gaps or not days:
        return 0.0

    lo, hi = SEMI_MONTHLY_GAP
    gap_score = sum(1 for g in gaps if lo <= g <= hi) / len(gaps)

    early_mid = sum(1 for d in days if d in SEMI_MONTHLY_EARLY or d in SEMI_MONTHLY_MID)
    mid_late = sum(1 for d in days if d in SEMI_MONTHLY_MID or d in SEMI_MONTHLY_LATE)
    window_score = max(early_mid, mid_late) / len(days)

    return max(gap_score, window_score)


def allowed_days(days: Sequence[int]) -> set[int]:
    """Days a series is expected on: observed boundary days plus dominant day +-2."""
    allowed = {d for d in days if is_month_boundary(d)}
    dom = dominant_day(days)
    if dom is not None:
        allowed.update(
            k
            for k in range(dom - ALLOWED_DAY_TOLERANCE, dom + ALLOWED_DAY_TOLERANCE + 1)
            if 1 <= k <= 31
        )
    return allowed


def day_window_overlap(days_a: Sequence[int], days_b: Sequence[int]) -> float:
    """Overlap of two allowed-day sets relative to the smaller one."""
    a = allowed_days(days_a)
    b = allowed_days(days_b)
    if not a or not b:
        return 0.0
    return len(a & b) / min(len(a), len(b))
