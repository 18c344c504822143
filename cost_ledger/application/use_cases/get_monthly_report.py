"""Use case to build the detailed monthly expense report."""

from cost_ledger.application.ports.expense_store import ExpenseStorePort
from cost_ledger.application.use_cases.rate_provider import RateProvider
from cost_ledger.domain.models import MonthlyReport
from cost_ledger.domain.services.periods import filter_by_month
from cost_ledger.domain.services.reports import (
    compute_monthly_report,
    convert_records,
)
from cost_ledger.infrastructure.logging.logger import get_app_logger


class GetMonthlyReportUseCase:
    """Build a month's line items and its converted grand total."""

    def __init__(
        self,
        expense_store: ExpenseStorePort,
        rate_provider: RateProvider,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            expense_store: Port providing stored expense records.
            rate_provider: Provider fetching the current rate table.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._expense_store = expense_store
        self._rate_provider = rate_provider
        self._logger = logger or get_app_logger()

    async def execute(
        self,
        year: int,
        month: int,
        target_currency: str,
    ) -> MonthlyReport:
        """Return the monthly report in the target currency.

        Line items keep their original amounts; only the total is converted.
        A month without expenses is reported without fetching rates.

        Args:
            year: Calendar year in local time.
            month: Calendar month (1-12) in local time.
            target_currency: Currency code of the grand total.

        Returns:
            MonthlyReport: Line items and the rounded converted total.

        Raises:
            ValueError: If month is outside 1..12.
            RateFetchError: If the rate table cannot be retrieved.
            RateFormatError: If the rate table has an unexpected shape.
        """
        records = filter_by_month(
            await self._expense_store.list_all_expenses(),
            year,
            month,
        )
        if not records:
            self._logger.info(
                f"No expenses for {year}-{month:02d}; skipping rate fetch"
            )
            return compute_monthly_report(year, month, [], [], target_currency)

        rates = await self._rate_provider.fetch_rates()
        converted = convert_records(
            records,
            target_currency,
            rates,
            self._logger,
        )
        report = compute_monthly_report(
            year,
            month,
            records,
            converted,
            target_currency,
        )
        self._logger.info(
            f"Monthly report {year}-{month:02d}: {len(records)} expenses, "
            f"total={report.total.total} {target_currency}"
        )
        return report


__all__ = ["GetMonthlyReportUseCase", "MonthlyReport"]
