"""Recurring auto-pay and deposit detection for raw transaction histories."""

from smartbudget_recurring.data_models import (
    DetectedAutoPay,
    DetectedRecurringDeposit,
    TransactionRecord,
)
from smartbudget_recurring.inference import (
    RecurringDetectionOrchestrator,
    RecurringDetectionReport,
    detect_autopay,
    detect_recurring_deposits,
)

__version__ = "0.1.0"

__all__ = [
    "DetectedAutoPay",
    "DetectedRecurringDeposit",
    "RecurringDetectionOrchestrator",
    "RecurringDetectionReport",
    "TransactionRecord",
    "detect_autopay",
    "detect_recurring_deposits",
]
