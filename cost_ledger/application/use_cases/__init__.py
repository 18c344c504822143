"""Application use cases package."""

from .convert_expenses import ConvertExpensesUseCase
from .get_category_breakdown import GetCategoryBreakdownUseCase
from .get_monthly_report import GetMonthlyReportUseCase
from .get_yearly_breakdown import GetYearlyBreakdownUseCase
from .list_monthly_expenses import ListMonthlyExpensesUseCase
from .manage_rate_source import ManageRateSourceUseCase
from .rate_provider import RateProvider
from .record_expense import RecordExpenseUseCase

__all__ = [
    "ConvertExpensesUseCase",
    "GetCategoryBreakdownUseCase",
    "GetMonthlyReportUseCase",
    "GetYearlyBreakdownUseCase",
    "ListMonthlyExpensesUseCase",
    "ManageRateSourceUseCase",
    "RateProvider",
    "RecordExpenseUseCase",
]
