"""Shared fakes for application use case tests."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from cost_ledger.domain.models import ExpenseRecord


def make_record(
    record_id: int,
    amount: float,
    currency: str,
    category: str,
    recorded_at: datetime,
    description: str = "",
) -> ExpenseRecord:
    return ExpenseRecord(
        id=record_id,
        amount=amount,
        currency=currency,
        category=category,
        description=description,
        recorded_at=recorded_at,
    )


@pytest.fixture
def september_records() -> list[ExpenseRecord]:
    """Records of September 2025 plus one from October and one from 2024."""
    return [
        make_record(1, 200, "USD", "FOOD", datetime(2025, 9, 12, 10, 0), "Groceries"),
        make_record(2, 120, "GBP", "Education", datetime(2025, 9, 18, 14, 0), "Books"),
        make_record(3, 50, "USD", "FOOD", datetime(2025, 10, 2, 9, 0), "Lunch"),
        make_record(4, 999, "USD", "FOOD", datetime(2024, 9, 12, 10, 0), "Old"),
    ]


@pytest.fixture
def expense_store(september_records) -> MagicMock:
    store = MagicMock()
    store.list_all_expenses = AsyncMock(return_value=september_records)
    return store


@pytest.fixture
def rate_provider() -> MagicMock:
    provider = MagicMock()
    provider.fetch_rates = AsyncMock(return_value={"USD": 1, "GBP": 0.6})
    provider.default_address = "https://rates.example.com/default.json"
    return provider
