"""Domain package for expense records, reports, and conversion rules."""

from .constants import (
    DEFAULT_CATEGORIES,
    DEFAULT_RATES_URL,
    RATE_SOURCE_SETTING_KEY,
    SUPPORTED_CURRENCIES,
    VALID_CURRENCIES,
)
from .errors import (
    CostLedgerError,
    InvalidRateSourceError,
    RateFetchError,
    RateFormatError,
    RateProviderError,
    StoreError,
    StoreReadError,
    StoreWriteError,
)
from .models import (
    CategoryAmount,
    ConvertedExpense,
    ExpenseDraft,
    ExpenseRecord,
    LineItem,
    MonthAmount,
    MonthlyReport,
    RateSourceCheck,
    ReportTotal,
)
from .services import convert_amount, normalize_rates

__all__ = [
    "DEFAULT_CATEGORIES",
    "DEFAULT_RATES_URL",
    "RATE_SOURCE_SETTING_KEY",
    "SUPPORTED_CURRENCIES",
    "VALID_CURRENCIES",
    "CostLedgerError",
    "InvalidRateSourceError",
    "RateFetchError",
    "RateFormatError",
    "RateProviderError",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    "CategoryAmount",
    "ConvertedExpense",
    "ExpenseDraft",
    "ExpenseRecord",
    "LineItem",
    "MonthAmount",
    "MonthlyReport",
    "RateSourceCheck",
    "ReportTotal",
    "convert_amount",
    "normalize_rates",
]
