"""Composition root for wiring infrastructure adapters."""

from cost_ledger.application.ports.clock import ClockPort
from cost_ledger.application.ports.database import DatabaseEnginePort
from cost_ledger.application.ports.expense_store import ExpenseStorePort
from cost_ledger.application.ports.rate_source import RateSourcePort
from cost_ledger.application.use_cases.convert_expenses import (
    ConvertExpensesUseCase,
)
from cost_ledger.application.use_cases.get_category_breakdown import (
    GetCategoryBreakdownUseCase,
)
from cost_ledger.application.use_cases.get_monthly_report import (
    GetMonthlyReportUseCase,
)
from cost_ledger.application.use_cases.get_yearly_breakdown import (
    GetYearlyBreakdownUseCase,
)
from cost_ledger.application.use_cases.list_monthly_expenses import (
    ListMonthlyExpensesUseCase,
)
from cost_ledger.application.use_cases.manage_rate_source import (
    ManageRateSourceUseCase,
)
from cost_ledger.application.use_cases.rate_provider import RateProvider
from cost_ledger.application.use_cases.record_expense import (
    RecordExpenseUseCase,
)
from cost_ledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from cost_ledger.infrastructure.expense_store import SqlAlchemyExpenseStore
from cost_ledger.infrastructure.logging.logger import get_app_logger
from cost_ledger.infrastructure.rate_source import HttpxRateSource
from cost_ledger.infrastructure.settings import AppSettings


def build_database_adapter(
    settings: AppSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or AppSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved.database_url)


def build_expense_store(
    db_port: DatabaseEnginePort | None = None,
    clock: ClockPort | None = None,
) -> ExpenseStorePort:
    """Return the record store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyExpenseStore(
        resolved_db,
        clock=clock,
        logger=get_app_logger(),
    )


def build_rate_source(settings: AppSettings | None = None) -> RateSourcePort:
    """Return the HTTP rate source."""
    resolved = settings or AppSettings.from_env()
    return HttpxRateSource(timeout=resolved.rates_timeout, logger=get_app_logger())


def build_rate_provider(
    expense_store: ExpenseStorePort,
    settings: AppSettings | None = None,
    rate_source: RateSourcePort | None = None,
) -> RateProvider:
    """Return the rate provider reading overrides from the store."""
    resolved = settings or AppSettings.from_env()
    return RateProvider(
        expense_store,
        rate_source or build_rate_source(resolved),
        logger=get_app_logger(),
        default_address=resolved.default_rates_url,
    )


def build_record_expense(expense_store: ExpenseStorePort) -> RecordExpenseUseCase:
    """Return the use case recording expenses."""
    return RecordExpenseUseCase(expense_store, logger=get_app_logger())


def build_list_monthly_expenses(
    expense_store: ExpenseStorePort,
) -> ListMonthlyExpensesUseCase:
    """Return the use case listing a month's expenses."""
    return ListMonthlyExpensesUseCase(expense_store, logger=get_app_logger())


def build_monthly_report(
    expense_store: ExpenseStorePort,
    rate_provider: RateProvider,
) -> GetMonthlyReportUseCase:
    """Return the monthly report use case."""
    return GetMonthlyReportUseCase(
        expense_store,
        rate_provider,
        logger=get_app_logger(),
    )


def build_category_breakdown(
    expense_store: ExpenseStorePort,
    rate_provider: RateProvider,
) -> GetCategoryBreakdownUseCase:
    """Return the category breakdown use case."""
    return GetCategoryBreakdownUseCase(
        expense_store,
        rate_provider,
        logger=get_app_logger(),
    )


def build_yearly_breakdown(
    expense_store: ExpenseStorePort,
    rate_provider: RateProvider,
) -> GetYearlyBreakdownUseCase:
    """Return the yearly breakdown use case."""
    return GetYearlyBreakdownUseCase(
        expense_store,
        rate_provider,
        logger=get_app_logger(),
    )


def build_convert_expenses(rate_provider: RateProvider) -> ConvertExpensesUseCase:
    """Return the use case converting expenses for display."""
    return ConvertExpensesUseCase(rate_provider, logger=get_app_logger())


def build_manage_rate_source(
    expense_store: ExpenseStorePort,
    rate_provider: RateProvider,
) -> ManageRateSourceUseCase:
    """Return the use case managing the rate source override."""
    return ManageRateSourceUseCase(
        expense_store,
        rate_provider,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_expense_store",
    "build_rate_source",
    "build_rate_provider",
    "build_record_expense",
    "build_list_monthly_expenses",
    "build_monthly_report",
    "build_category_breakdown",
    "build_yearly_breakdown",
    "build_convert_expenses",
    "build_manage_rate_source",
]
