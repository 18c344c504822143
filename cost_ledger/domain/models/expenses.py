"""Domain models for stored expense records and settings."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ExpenseDraft:
    """Caller-supplied part of an expense before it is stored.

    Attributes:
        amount: Amount in the original currency.
        currency: Currency code of the amount.
        category: Free-form grouping label.
        description: Free-form text.
    """

    amount: float
    currency: str
    category: str
    description: str = ""


@dataclass(frozen=True)
class ExpenseRecord:
    """Expense as persisted by the record store.

    Attributes:
        id: Store-assigned identifier.
        amount: Amount in the original currency; None when a non-numeric
            amount such as NaN was stored.
        currency: Currency code of the amount.
        category: Free-form grouping label.
        description: Free-form text.
        recorded_at: Timezone-aware creation time stamped by the store.
    """

    id: int
    amount: float | None
    currency: str
    category: str
    description: str
    recorded_at: datetime


__all__ = ["ExpenseDraft", "ExpenseRecord"]
