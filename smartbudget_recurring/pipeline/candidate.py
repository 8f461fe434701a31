"""Internal value types passed between pipeline stages."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from smartbudget_recurring.data_models import TransactionRecord


@dataclass(frozen=True)
class Item:
    """A transaction paired with its tokens and keys."""

    txn: TransactionRecord
    tokens: frozenset[str]
    merchant_key: str
    series_key: str

    @property
    def date(self) -> date:
        return self.txn.date

    @property
    def day(self) -> int:
        return self.txn.date.day


@dataclass(frozen=True)
class SeriesCandidate:
    """A scored group of items believed to be one recurring series."""

    merchant_key: str
    series_key: str
    display_name: str
    items: tuple[Item, ...]
    confidence: float
    cadence: str

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def dates(self) -> list[date]:
        return [i.date for i in self.items]

    @property
    def days(self) -> list[int]:
        return [i.day for i in self.items]

    @property
    def amounts(self) -> list[int]:
        return [i.txn.amount_cents for i in self.items]

    @property
    def token_union(self) -> frozenset[str]:
        return frozenset().union(*(i.tokens for i in self.items))


def sort_by_date(items: Sequence[Item]) -> tuple[Item, ...]:
    # Stable: same-day items keep their input order
    return tuple(sorted(items, key=lambda i: i.date))
