"""Tests for the GetMonthlyReportUseCase."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from cost_ledger.application.use_cases.get_monthly_report import (
    GetMonthlyReportUseCase,
)
from cost_ledger.domain.errors import RateFetchError, RateFormatError
from cost_ledger.domain.models import ExpenseRecord


def _record(record_id, amount, recorded_at) -> ExpenseRecord:
    return ExpenseRecord(
        id=record_id,
        amount=amount,
        currency="USD",
        category="FOOD",
        description="",
        recorded_at=recorded_at,
    )


@pytest.mark.asyncio
async def test_execute_reports_original_lines_and_converted_total(
    expense_store,
    rate_provider,
) -> None:
    """Lines keep their currency while the total is converted."""
    use_case = GetMonthlyReportUseCase(
        expense_store,
        rate_provider,
        logger=MagicMock(),
    )

    report = await use_case.execute(2025, 9, "USD")

    assert report.to_dict() == {
        "year": 2025,
        "month": 9,
        "costs": [
            {
                "amount": 200,
                "currency": "USD",
                "category": "FOOD",
                "description": "Groceries",
                "date": {"day": 12},
            },
            {
                "amount": 120,
                "currency": "GBP",
                "category": "Education",
                "description": "Books",
                "date": {"day": 18},
            },
        ],
        "total": {"currency": "USD", "total": 400.0},
    }
    rate_provider.fetch_rates.assert_awaited_once_with()


@pytest.mark.asyncio
async def test_line_items_never_carry_converted_amounts(
    expense_store,
    rate_provider,
) -> None:
    use_case = GetMonthlyReportUseCase(
        expense_store,
        rate_provider,
        logger=MagicMock(),
    )

    report = await use_case.execute(2025, 9, "GBP")

    for item in report.to_dict()["costs"]:
        assert "convertedAmount" not in item
        assert "converted_amount" not in item
    assert [item.amount for item in report.costs] == [200, 120]
    assert report.total.total == 240.0


@pytest.mark.asyncio
async def test_empty_month_skips_rate_fetch(expense_store, rate_provider) -> None:
    """A month without expenses must not touch the network."""
    use_case = GetMonthlyReportUseCase(
        expense_store,
        rate_provider,
        logger=MagicMock(),
    )

    report = await use_case.execute(2025, 1, "ILS")

    assert report.costs == []
    assert report.total.to_dict() == {"currency": "ILS", "total": 0.0}
    rate_provider.fetch_rates.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_target_rate_degrades_to_unconverted_amounts(
    expense_store,
    rate_provider,
) -> None:
    logger = MagicMock()
    use_case = GetMonthlyReportUseCase(expense_store, rate_provider, logger=logger)

    report = await use_case.execute(2025, 9, "JPY")

    assert report.total.total == 320.0
    assert logger.warning.call_count == 2


@pytest.mark.asyncio
async def test_nan_amount_does_not_poison_total(rate_provider) -> None:
    store = MagicMock()
    store.list_all_expenses = AsyncMock(
        return_value=[
            _record(1, float("nan"), datetime(2025, 9, 1, 12, 0)),
            _record(2, 30, datetime(2025, 9, 2, 12, 0)),
        ]
    )
    use_case = GetMonthlyReportUseCase(store, rate_provider, logger=MagicMock())

    report = await use_case.execute(2025, 9, "USD")

    assert report.total.total == 30.0


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [RateFetchError("down"), RateFormatError("bad")])
async def test_rate_errors_propagate(expense_store, rate_provider, error) -> None:
    rate_provider.fetch_rates.side_effect = error
    use_case = GetMonthlyReportUseCase(
        expense_store,
        rate_provider,
        logger=MagicMock(),
    )

    with pytest.raises(type(error)):
        await use_case.execute(2025, 9, "USD")


@pytest.mark.asyncio
async def test_invalid_month_raises(expense_store, rate_provider) -> None:
    use_case = GetMonthlyReportUseCase(
        expense_store,
        rate_provider,
        logger=MagicMock(),
    )

    with pytest.raises(ValueError):
        await use_case.execute(2025, 13, "USD")
