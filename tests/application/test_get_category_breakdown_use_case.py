"""Tests for the GetCategoryBreakdownUseCase."""

from unittest.mock import MagicMock

import pytest

from cost_ledger.application.use_cases.get_category_breakdown import (
    GetCategoryBreakdownUseCase,
)
from cost_ledger.domain.errors import RateFetchError


@pytest.mark.asyncio
async def test_execute_groups_converted_amounts_by_category(
    expense_store,
    rate_provider,
) -> None:
    """Each category present in the month should get one converted total."""
    use_case = GetCategoryBreakdownUseCase(
        expense_store,
        rate_provider,
        logger=MagicMock(),
    )

    breakdown = await use_case.execute(2025, 9, "USD")

    assert [entry.to_dict() for entry in breakdown] == [
        {"category": "FOOD", "amount": 200.0, "currency": "USD"},
        {"category": "Education", "amount": 200.0, "currency": "USD"},
    ]
    rate_provider.fetch_rates.assert_awaited_once_with()


@pytest.mark.asyncio
async def test_empty_month_returns_no_entries_without_fetch(
    expense_store,
    rate_provider,
) -> None:
    """Quiet months should not be zero-filled nor trigger a fetch."""
    use_case = GetCategoryBreakdownUseCase(
        expense_store,
        rate_provider,
        logger=MagicMock(),
    )

    breakdown = await use_case.execute(2025, 2, "USD")

    assert breakdown == []
    rate_provider.fetch_rates.assert_not_awaited()


@pytest.mark.asyncio
async def test_records_outside_the_month_are_ignored(
    expense_store,
    rate_provider,
) -> None:
    use_case = GetCategoryBreakdownUseCase(
        expense_store,
        rate_provider,
        logger=MagicMock(),
    )

    breakdown = await use_case.execute(2025, 10, "USD")

    assert [entry.to_dict() for entry in breakdown] == [
        {"category": "FOOD", "amount": 50.0, "currency": "USD"},
    ]


@pytest.mark.asyncio
async def test_fetch_errors_propagate(expense_store, rate_provider) -> None:
    rate_provider.fetch_rates.side_effect = RateFetchError("HTTP 503", status_code=503)
    use_case = GetCategoryBreakdownUseCase(
        expense_store,
        rate_provider,
        logger=MagicMock(),
    )

    with pytest.raises(RateFetchError):
        await use_case.execute(2025, 9, "USD")
