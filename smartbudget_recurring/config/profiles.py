"""Detection profiles for auto-pay charges and recurring deposits.

Both detectors run the same pipeline. Everything that differs between them
(vocabularies, cadence windows, score weights and which post-processing
steps run) lives here.
"""

from dataclasses import dataclass
from typing import Literal

from smartbudget_recurring.preprocessing.keys import TieBreak

Direction = Literal["any", "deposits"]


@dataclass(frozen=True)
class CadenceWindow:
    """Accepted day-gap range for one named cadence."""

    name: str
    min_days: int
    max_days: int


@dataclass(frozen=True)
class ScoreWeights:
    """Linear weights of the confidence formula."""

    cadence: float
    day_of_month: float
    amount: float
    frequency: float
    # Occurrence count at which the frequency signal saturates
    frequency_cap: int
    # (token, bonus) pairs, each added once when any item carries the token
    text_hints: tuple[tuple[str, float], ...] = ()


@dataclass(frozen=True)
class DetectionProfile:
    name: str
    stop_words: frozenset[str]
    # Retained as tokens but never part of the merchant key
    key_excluded_words: frozenset[str]
    # Channel qualifiers appended to the series key, empty = no channel split
    qualifier_words: tuple[str, ...]
    cadences: tuple[CadenceWindow, ...]
    weights: ScoreWeights
    direction: Direction = "any"
    display_tie_break: TieBreak = "alphabetical"
    semi_monthly: bool = False
    widen_payment_like: bool = False
    min_cadence_score: float = 0.0
    min_positive_share: float = 0.0
    merge_drifted: bool = False
    dedupe_by_merchant: bool = False


MONTHLY = CadenceWindow("Monthly", 28, 35)
# ACH settlement dates drift more than fixed-date subscriptions
PAYMENT_LIKE_MONTHLY = CadenceWindow("Monthly", 25, 40)
SEMI_MONTHLY = "SemiMonthly"

DEFAULT_DOM_TOLERANCE = 2
PAYMENT_LIKE_DOM_TOLERANCE = 5

PAYMENT_LIKE_TOKENS = frozenset({"amex", "epayment", "ach", "pmt", "pymt", "payment"})
PAYMENT_LIKE_TITLE_MARKERS = ("EPAYMENT", "ACH", "PMT", "PAYMENT")

AUTOPAY_PROFILE = DetectionProfile(
    name="autopay",
    stop_words=frozenset(
        {
            "pos",
            "visa",
            "debit",
            "credit",
            "ach",
            "onlinebanking",
            "purchase",
            "payment",
            "pmt",
            "pymt",
            "transaction",
            "ret",
        }
    ),
    key_excluded_words=frozenset({"auto", "online", "recurring"}),
    qualifier_words=("auto", "online", "billpay", "web", "app", "card", "phone", "kiosk"),
    cadences=(MONTHLY,),
    weights=ScoreWeights(
        cadence=0.50,
        day_of_month=0.30,
        amount=0.0,
        frequency=0.20,
        frequency_cap=6,
        text_hints=(("auto", 0.08),),
    ),
    widen_payment_like=True,
    merge_drifted=True,
    dedupe_by_merchant=True,
)

DEPOSIT_PROFILE = DetectionProfile(
    name="deposits",
    stop_words=frozenset({"corp", "co", "inc", "llc", "ltd"}),
    key_excluded_words=frozenset({"deposit", "direct", "payroll"}),
    qualifier_words=(),
    cadences=(
        CadenceWindow("Weekly", 6, 8),
        CadenceWindow("Biweekly", 12, 16),
        CadenceWindow("Every3Weeks", 20, 22),
        CadenceWindow("Every4Weeks", 27, 29),
        MONTHLY,
    ),
    weights=ScoreWeights(
        cadence=0.50,
        day_of_month=0.0,
        amount=0.25,
        frequency=0.25,
        frequency_cap=8,
        text_hints=(("deposit", 0.06), ("payroll", 0.06), ("direct", 0.04)),
    ),
    direction="deposits",
    display_tie_break="first_seen",
    semi_monthly=True,
    min_cadence_score=0.50,
    min_positive_share=0.90,
)
