"""Ports for persisting expense records and settings."""

from typing import Protocol

from cost_ledger.domain.models import ExpenseDraft, ExpenseRecord


class SettingsStorePort(Protocol):
    """Port exposing key/value settings."""

    async def get_setting(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""

    async def put_setting(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""


class ExpenseStorePort(SettingsStorePort, Protocol):
    """Port exposing the expense collection and settings.

    Implementations stamp the creation time and identifier themselves and
    raise StoreReadError or StoreWriteError on failures.
    """

    async def open(self) -> None:
        """Prepare the storage schema; calling it again is harmless."""

    async def create_expense(self, draft: ExpenseDraft) -> ExpenseRecord:
        """Persist a new expense and return it with generated fields."""

    async def list_all_expenses(self) -> list[ExpenseRecord]:
        """Return every stored expense, in no guaranteed order."""

    async def get_expense(self, expense_id: int) -> ExpenseRecord | None:
        """Return one expense, or None when the identifier is unknown."""


__all__ = ["SettingsStorePort", "ExpenseStorePort"]
