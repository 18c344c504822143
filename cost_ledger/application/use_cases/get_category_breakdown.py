"""Use case to compute a month's expenses by category."""

from cost_ledger.application.ports.expense_store import ExpenseStorePort
from cost_ledger.application.use_cases.rate_provider import RateProvider
from cost_ledger.domain.models import CategoryAmount
from cost_ledger.domain.services.periods import filter_by_month
from cost_ledger.domain.services.reports import (
    compute_category_breakdown,
    convert_records,
)
from cost_ledger.infrastructure.logging.logger import get_app_logger


class GetCategoryBreakdownUseCase:
    """Compute converted category totals for one month."""

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
    ) -> list[CategoryAmount]:
        """Return one converted total per category present in the month.

        Categories without expenses are omitted; an empty month returns an
        empty list without fetching rates.

        Args:
            year: Calendar year in local time.
            month: Calendar month (1-12) in local time.
            target_currency: Currency code of the totals.

        Returns:
            list[CategoryAmount]: Totals in order of first appearance.
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
            return []

        rates = await self._rate_provider.fetch_rates()
        converted = convert_records(
            records,
            target_currency,
            rates,
            self._logger,
        )
        breakdown = compute_category_breakdown(converted, target_currency)
        self._logger.info(
            f"Category breakdown {year}-{month:02d}: "
            f"{len(breakdown)} categories in {target_currency}"
        )
        return breakdown


__all__ = ["GetCategoryBreakdownUseCase", "CategoryAmount"]
