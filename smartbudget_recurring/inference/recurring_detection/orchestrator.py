"""Recurring detection orchestrator.

This orchestrator is stateless. It narrows an in-memory transaction list to
one account and a lookback window, then runs both detectors. Fetching the
records and rendering the report stay with the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date

from smartbudget_recurring.config.settings import Settings, get_settings
from smartbudget_recurring.data_models import (
    DetectedAutoPay,
    DetectedRecurringDeposit,
    TransactionRecord,
)

from .detector import detect_autopay, detect_recurring_deposits

logger = logging.getLogger(__name__)


@dataclass
class RecurringDetectionReport:
    """Both detector outputs for one account."""

    account_id: int | None
    window_start: date | None
    window_end: date | None
    transaction_count: int
    autopays: list[DetectedAutoPay] = field(default_factory=list)
    deposits: list[DetectedRecurringDeposit] = field(default_factory=list)


def subtract_months(day: date, months: int) -> date:
    """Same day ``months`` earlier, clipped to the end of shorter months."""
    total = day.year * 12 + (day.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    for candidate_day in (day.day, 30, 29, 28):
        try:
            return date(year, month, candidate_day)
        except ValueError:
            continue
    raise ValueError(f"Cannot subtract {months} months from {day}")


class RecurringDetectionOrchestrator:
    """Application service running both detectors over one account's history."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or get_settings()

    def select(
        self,
        transactions: Sequence[TransactionRecord],
        account_id: int | None = None,
        as_of: date | None = None,
    ) -> list[TransactionRecord]:
        """Records of ``account_id`` dated within the lookback window.

        Without ``account_id`` all accounts are kept. Without ``as_of`` no
        date filtering happens.
        """
        selected = [
            txn for txn in transactions if account_id is None or txn.account_id == account_id
        ]
        if as_of is not None:
            start = subtract_months(as_of, self._settings.lookback_months)
            selected = [txn for txn in selected if start <= txn.date <= as_of]
        return selected

    def detect(
        self,
        transactions: Sequence[TransactionRecord],
        account_id: int | None = None,
        as_of: date | None = None,
    ) -> RecurringDetectionReport:
        """Detect auto-pays and recurring deposits.

        Args:
            transactions: Records as fetched by the caller
            account_id: Restrict to one account
            as_of: End of the lookback window (inclusive)

        Returns:
            RecurringDetectionReport with both ordered result lists
        """
        settings = self._settings
        selected = self.select(transactions, account_id, as_of)

        logger.info(
            "Detecting recurring series: %d of %d transactions, account=%s, as_of=%s",
            len(selected), len(transactions), account_id, as_of,
        )

        autopays = detect_autopay(selected, settings.min_occurrences, settings.min_confidence)
        deposits = detect_recurring_deposits(
            selected, settings.min_occurrences, settings.min_confidence
        )

        return RecurringDetectionReport(
            account_id=account_id,
            window_start=subtract_months(as_of, settings.lookback_months) if as_of else None,
            window_end=as_of,
            transaction_count=len(selected),
            autopays=autopays,
            deposits=deposits,
        )
