"""Title tokenization."""

from collections.abc import Iterable


def tokenize(title: str, stop_words: Iterable[str] = frozenset()) -> frozenset[str]:
    """Split a transaction title into a set of lowercase word tokens.

    Every non-letter becomes a separator, single-letter tokens and stop
    words are dropped. Qualifier words such as "auto" or "online" are kept
    on purpose; the key builder decides what to do with them.

    Examples:
        "HOME DEPOT AUTO PYMT" -> {"home", "depot", "auto", "pymt"}
        "NETFLIX.COM 866-579-7172" -> {"netflix", "com"}
    """
    stop = stop_words if isinstance(stop_words, (set, frozenset)) else set(stop_words)
    cleaned = "".join(ch if ch.isalpha() else " " for ch in title.lower())
    return frozenset(p for p in cleaned.split() if len(p) > 1 and p not in stop)
