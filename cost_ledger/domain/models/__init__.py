"""Domain models package."""

from .expenses import ExpenseDraft, ExpenseRecord
from .reports import (
    CategoryAmount,
    ConvertedExpense,
    LineItem,
    MonthAmount,
    MonthlyReport,
    RateSourceCheck,
    ReportTotal,
)

__all__ = [
    "ExpenseDraft",
    "ExpenseRecord",
    "LineItem",
    "ReportTotal",
    "MonthlyReport",
    "CategoryAmount",
    "MonthAmount",
    "ConvertedExpense",
    "RateSourceCheck",
]
