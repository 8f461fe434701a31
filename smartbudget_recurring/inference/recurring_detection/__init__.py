"""Recurring transaction detection module."""

from .detector import detect_autopay, detect_recurring_deposits
from .orchestrator import RecurringDetectionOrchestrator, RecurringDetectionReport

__all__ = [
    "RecurringDetectionOrchestrator",
    "RecurringDetectionReport",
    "detect_autopay",
    "detect_recurring_deposits",
]
