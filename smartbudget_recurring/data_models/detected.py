"""Detected recurring series returned by the detectors."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, computed_field


class DetectedSeries(BaseModel):
    """Fields shared by every detected series."""

    model_config = ConfigDict(frozen=True)

    series_key: str
    display_name: str
    count: int = Field(..., ge=1)
    avg_amount_cents: int
    cadence: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    first_seen: date
    last_seen: date

    @computed_field  # type: ignore[prop-decorator]
    @property
    def avg_amount(self) -> Decimal:
        return Decimal(self.avg_amount_cents) / 100


class DetectedAutoPay(DetectedSeries):
    """A monthly auto-pay charge series."""

    merchant_key: str


class DetectedRecurringDeposit(DetectedSeries):
    """A recurring deposit series (usually a paycheck)."""

    employer_key: str
