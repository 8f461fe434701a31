"""Inference layer: the public detectors and their orchestrator."""

from .recurring_detection import (
    RecurringDetectionOrchestrator,
    RecurringDetectionReport,
    detect_autopay,
    detect_recurring_deposits,
)

__all__ = [
    "RecurringDetectionOrchestrator",
    "RecurringDetectionReport",
    "detect_autopay",
    "detect_recurring_deposits",
]
