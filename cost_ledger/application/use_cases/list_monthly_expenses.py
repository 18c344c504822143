"""Use case to list the expenses recorded in one month."""

from cost_ledger.application.ports.expense_store import ExpenseStorePort
from cost_ledger.domain.models import ExpenseRecord
from cost_ledger.domain.services.periods import filter_by_month
from cost_ledger.infrastructure.logging.logger import get_app_logger


class ListMonthlyExpensesUseCase:
    """Return the raw expense records of a month, oldest first."""

    def __init__(self, expense_store: ExpenseStorePort, logger=None) -> None:
        self._expense_store = expense_store
        self._logger = logger or get_app_logger()

    async def execute(self, year: int, month: int) -> list[ExpenseRecord]:
        """Return the month's records sorted by creation time.

        Args:
            year: Calendar year in local time.
            month: Calendar month (1-12) in local time.

        Returns:
            list[ExpenseRecord]: Matching records.
        """
        records = filter_by_month(
            await self._expense_store.list_all_expenses(),
            year,
            month,
        )
        self._logger.info(
            f"Found {len(records)} expenses for {year}-{month:02d}"
        )
        return sorted(records, key=lambda record: (record.recorded_at, record.id))


__all__ = ["ListMonthlyExpensesUseCase"]
