"""Pydantic models for detector input and output."""

from .detected import DetectedAutoPay, DetectedRecurringDeposit, DetectedSeries
from .transaction import TransactionRecord

__all__ = [
    "DetectedAutoPay",
    "DetectedRecurringDeposit",
    "DetectedSeries",
    "TransactionRecord",
]
