"""Use case to express a list of expenses in a display currency."""

from collections.abc import Sequence

from cost_ledger.application.use_cases.rate_provider import RateProvider
from cost_ledger.domain.models import ConvertedExpense, ExpenseRecord
from cost_ledger.domain.services.reports import (
    compute_converted_expenses,
    convert_records,
)
from cost_ledger.infrastructure.logging.logger import get_app_logger


class ConvertExpensesUseCase:
    """Pair each expense with its amount in a display currency."""

    def __init__(self, rate_provider: RateProvider, logger=None) -> None:
        self._rate_provider = rate_provider
        self._logger = logger or get_app_logger()

    async def execute(
        self,
        expenses: Sequence[ExpenseRecord],
        target_currency: str,
    ) -> list[ConvertedExpense]:
        """Convert every expense with one freshly fetched rate table.

        Args:
            expenses: Records to convert, usually one month's listing.
            target_currency: Display currency code.

        Returns:
            list[ConvertedExpense]: Records in input order with converted
            amounts; empty input returns an empty list without fetching.
        """
        if not expenses:
            return []
        rates = await self._rate_provider.fetch_rates()
        converted = convert_records(
            expenses,
            target_currency,
            rates,
            self._logger,
        )
        return compute_converted_expenses(converted, target_currency)


__all__ = ["ConvertExpensesUseCase", "ConvertedExpense"]
