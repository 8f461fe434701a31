"""Title preprocessing: tokens and keys."""

from .keys import build_display_name, build_merchant_key, build_series_key, ignore_case_key
from .tokenizer import tokenize

__all__ = [
    "build_display_name",
    "build_merchant_key",
    "build_series_key",
    "ignore_case_key",
    "tokenize",
]
