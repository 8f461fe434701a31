"""Shared builders for recurring detection tests."""

from collections.abc import Callable, Sequence
from datetime import date
from itertools import count

import pytest
from smartbudget_recurring.config.profiles import AUTOPAY_PROFILE
from smartbudget_recurring.data_models import TransactionRecord
from smartbudget_recurring.pipeline import Item, SeriesCandidate
from smartbudget_recurring.preprocessing import (
    build_display_name,
    build_merchant_key,
    build_series_key,
    tokenize,
)

from tests.shared.dates import monthly_dates

TxnFactory = Callable[..., TransactionRecord]
CandidateFactory = Callable[..., SeriesCandidate]


@pytest.fixture
def make_txn() -> TxnFactory:
    """Build transaction records with increasing ids."""
    ids = count(1)

    def _make(title: str, when: date, amount_cents: int, account_id: int = 1) -> TransactionRecord:
        return TransactionRecord(
            id=next(ids),
            account_id=account_id,
            date=when,
            title=title,
            amount_cents=amount_cents,
        )

    return _make


@pytest.fixture
def make_series(make_txn: TxnFactory) -> Callable[..., list[TransactionRecord]]:
    """Build one record per date with a shared title and amount."""

    def _make(
        title: str, dates: Sequence[date], amount_cents: int, account_id: int = 1
    ) -> list[TransactionRecord]:
        return [make_txn(title, d, amount_cents, account_id) for d in dates]

    return _make


@pytest.fixture
def make_candidate(make_txn: TxnFactory) -> CandidateFactory:
    """Build a SeriesCandidate the way the auto-pay pipeline keys it."""

    def _make(
        title: str,
        dates: Sequence[date],
        amounts: int | Sequence[int],
        confidence: float = 0.9,
    ) -> SeriesCandidate:
        if isinstance(amounts, int):
            amounts = [amounts] * len(dates)

        items = []
        for d, amount in zip(dates, amounts, strict=True):
            tokens = tokenize(title, AUTOPAY_PROFILE.stop_words)
            merchant_key = build_merchant_key(tokens, AUTOPAY_PROFILE.key_excluded_words)
            items.append(
                Item(
                    txn=make_txn(title, d, amount),
                    tokens=tokens,
                    merchant_key=merchant_key,
                    series_key=build_series_key(
                        merchant_key, tokens, AUTOPAY_PROFILE.qualifier_words
                    ),
                )
            )

        return SeriesCandidate(
            merchant_key=items[0].merchant_key,
            series_key=items[0].series_key,
            display_name=build_display_name([title] * len(items)),
            items=tuple(sorted(items, key=lambda i: i.date)),
            confidence=confidence,
            cadence="Monthly",
        )

    return _make


@pytest.fixture
def drifting_loan_history(make_series) -> list[TransactionRecord]:
    """Two steady loan series joined by a weaker, drifting rename in between."""
    drifting = [date(2024, 5, 10), date(2024, 6, 14), date(2024, 7, 18), date(2024, 8, 22)]
    return (
        make_series("NISSAN LOAN", monthly_dates(date(2024, 1, 10), 4), -35_000)
        + make_series("NISSAN LOAN RETAIL", drifting, -35_000)
        + make_series("LOAN RETAIL SVC CORP", monthly_dates(date(2024, 9, 10), 4), -35_000)
    )
