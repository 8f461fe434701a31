"""Merchant key, series key and display name construction."""

from collections.abc import Iterable, Sequence
from typing import Literal

SERIES_KEY_SEPARATOR = " | "

TieBreak = Literal["alphabetical", "first_seen"]


def build_merchant_key(tokens: Iterable[str], excluded: Iterable[str] = ()) -> str:
    """Build a stable merchant identity from title tokens.

    Longer tokens are more likely to be brand words than connective noise,
    so the three longest (ties alphabetical) win. Titles made only of
    excluded words fall back to their two alphabetically smallest tokens.
    """
    tokens = set(tokens)
    excluded = set(excluded)

    core = sorted((t for t in tokens if t not in excluded), key=lambda t: (-len(t), t))[:3]
    if not core:
        core = sorted(tokens)[:2]

    return " ".join(core)


def build_series_key(merchant_key: str, tokens: Iterable[str], qualifiers: Sequence[str]) -> str:
    """Append the channel qualifiers present in ``tokens`` to the merchant key.

    "depot home" + {"auto"} -> "depot home | auto"
    """
    tokens = set(tokens)
    picked = sorted(q for q in qualifiers if q in tokens)
    if not picked:
        return merchant_key
    return SERIES_KEY_SEPARATOR.join([merchant_key, *picked])


def ignore_case_key(text: str) -> str:
    """Case-insensitive comparison key.

    Uppercases rather than casefolds, so punctuation such as "_" sorts after letters.
    """
    return text.upper()


def build_display_name(titles: Sequence[str], tie_break: TieBreak = "alphabetical") -> str:
    """Most frequent title, compared case-insensitively after stripping.

    Ties go to the alphabetically smallest title, or with
    ``tie_break="first_seen"`` to the title seen first. The returned spelling
    is the first one seen, so callers should pass titles in date order.
    """
    counts: dict[str, int] = {}
    spelling: dict[str, str] = {}
    for title in titles:
        stripped = title.strip()
        key = ignore_case_key(stripped)
        counts[key] = counts.get(key, 0) + 1
        spelling.setdefault(key, stripped)

    if not counts:
        return ""

    if tie_break == "first_seen":
        # max() keeps the first of equal counts, dicts keep insertion order
        best = max(counts, key=counts.__getitem__)
    else:
        best = min(counts, key=lambda k: (-counts[k], k))
    return spelling[best]
