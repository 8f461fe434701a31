"""Transaction record consumed by the detectors."""

from datetime import date

from pydantic import BaseModel, ConfigDict


class TransactionRecord(BaseModel):
    """A single posted transaction.

    Amounts are signed cents: deposits are positive, charges negative.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    account_id: int
    date: date
    title: str
    amount_cents: int
