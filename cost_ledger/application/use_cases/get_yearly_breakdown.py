"""Use case to compute a year's expenses month by month."""

from cost_ledger.application.ports.expense_store import ExpenseStorePort
from cost_ledger.application.use_cases.rate_provider import RateProvider
from cost_ledger.domain.models import MonthAmount
from cost_ledger.domain.services.periods import filter_by_year
from cost_ledger.domain.services.reports import (
    compute_yearly_breakdown,
    convert_records,
)
from cost_ledger.infrastructure.logging.logger import get_app_logger


class GetYearlyBreakdownUseCase:
    """Compute converted monthly totals for a whole year."""

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
        target_currency: str,
    ) -> list[MonthAmount]:
        """Return twelve converted monthly totals.

        Months without expenses are zero-filled. A year without expenses is
        reported without fetching rates.

        Args:
            year: Calendar year in local time.
            target_currency: Currency code of the totals.

        Returns:
            list[MonthAmount]: Entries for months 1 through 12.
        """
        records = filter_by_year(
            await self._expense_store.list_all_expenses(),
            year,
        )
        if not records:
            self._logger.info(f"No expenses for {year}; skipping rate fetch")
            return compute_yearly_breakdown([], target_currency)

        rates = await self._rate_provider.fetch_rates()
        converted = convert_records(
            records,
            target_currency,
            rates,
            self._logger,
        )
        breakdown = compute_yearly_breakdown(converted, target_currency)
        self._logger.info(
            f"Yearly breakdown {year}: {len(records)} expenses "
            f"in {target_currency}"
        )
        return breakdown


__all__ = ["GetYearlyBreakdownUseCase", "MonthAmount"]
