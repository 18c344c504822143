"""Use case to record a new expense."""

from cost_ledger.application.ports.expense_store import ExpenseStorePort
from cost_ledger.domain.models import ExpenseDraft, ExpenseRecord
from cost_ledger.infrastructure.logging.logger import get_app_logger


class RecordExpenseUseCase:
    """Persist an expense as entered by the user."""

    def __init__(self, expense_store: ExpenseStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            expense_store: Port persisting expense records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._expense_store = expense_store
        self._logger = logger or get_app_logger()

    async def execute(self, draft: ExpenseDraft) -> ExpenseRecord:
        """Store the draft verbatim.

        Args:
            draft: Amount, currency, category and description to store.

        Returns:
            ExpenseRecord: Stored record including id and creation time.

        Raises:
            StoreWriteError: If the store rejects the write.
        """
        record = await self._expense_store.create_expense(draft)
        self._logger.info(
            f"Recorded expense {record.id}: {record.amount} "
            f"{record.currency} [{record.category}]"
        )
        return record


__all__ = ["RecordExpenseUseCase"]
