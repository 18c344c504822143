"""Domain models for derived reports.

Every report model is a value object produced by a single use case call.
``to_dict`` returns the plain structure consumed by the presentation layer.
"""

from dataclasses import dataclass

from cost_ledger.domain.models.expenses import ExpenseRecord


@dataclass(frozen=True)
class LineItem:
    """Expense line of a monthly report, kept in its original currency."""

    amount: float
    currency: str
    category: str
    description: str
    day: int

    def to_dict(self) -> dict:
        return {
            "amount": self.amount,
            "currency": self.currency,
            "category": self.category,
            "description": self.description,
            "date": {"day": self.day},
        }


@dataclass(frozen=True)
class ReportTotal:
    """Grand total of a monthly report in the requested currency."""

    currency: str
    total: float

    def to_dict(self) -> dict:
        return {"currency": self.currency, "total": self.total}


@dataclass(frozen=True)
class MonthlyReport:
    """Detailed report of the expenses recorded in one month.

    Attributes:
        year: Requested year.
        month: Requested month (1-12).
        costs: Line items in their original currencies.
        total: Converted and rounded grand total.
    """

    year: int
    month: int
    costs: list[LineItem]
    total: ReportTotal

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "costs": [item.to_dict() for item in self.costs],
            "total": self.total.to_dict(),
        }


@dataclass(frozen=True)
class CategoryAmount:
    """Converted total for one category of a month."""

    category: str
    amount: float
    currency: str

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "amount": self.amount,
            "currency": self.currency,
        }


@dataclass(frozen=True)
class MonthAmount:
    """Converted total for one month of a year."""

    month: int
    amount: float
    currency: str

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "amount": self.amount,
            "currency": self.currency,
        }


@dataclass(frozen=True)
class ConvertedExpense:
    """Expense paired with its amount in a display currency.

    Attributes:
        expense: Stored expense record.
        converted_amount: Amount expressed in ``currency``.
        currency: Display currency of ``converted_amount``.
    """

    expense: ExpenseRecord
    converted_amount: float
    currency: str


@dataclass(frozen=True)
class RateSourceCheck:
    """Outcome of probing a rate source address.

    Attributes:
        address: Address that was probed.
        currencies: Codes quoted by the source, in payload order.
        missing_currencies: Expected codes the source does not quote.
    """

    address: str
    currencies: list[str]
    missing_currencies: list[str]

    @property
    def is_complete(self) -> bool:
        """Return True when every expected currency is quoted."""
        return not self.missing_currencies


__all__ = [
    "LineItem",
    "ReportTotal",
    "MonthlyReport",
    "CategoryAmount",
    "MonthAmount",
    "ConvertedExpense",
    "RateSourceCheck",
]
