"""End-to-end reporting over a real SQLite store and a mocked rate server."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

from cost_ledger.application.use_cases import (
    GetCategoryBreakdownUseCase,
    GetMonthlyReportUseCase,
    GetYearlyBreakdownUseCase,
    ManageRateSourceUseCase,
    RateProvider,
    RecordExpenseUseCase,
)
from cost_ledger.domain.constants import DEFAULT_RATES_URL
from cost_ledger.domain.models import ExpenseDraft
from cost_ledger.infrastructure.expense_store import SqlAlchemyExpenseStore
from cost_ledger.infrastructure.rate_source import HttpxRateSource

OVERRIDE = "https://rates.example.com/custom.json"
RATES = {"USD": 1, "GBP": 0.6, "ILS": 3.7, "EURO": 0.9}


class SettableClock:
    def __init__(self) -> None:
        self.current = datetime(2025, 9, 12, 12, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self.current


class EnginePort:
    def __init__(self, engine) -> None:
        self._engine = engine

    def get_store_engine(self):
        return self._engine


@pytest_asyncio.fixture
async def ledger(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'costs.db'}")
    clock = SettableClock()
    logger = MagicMock()
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, json=RATES)

    store = SqlAlchemyExpenseStore(EnginePort(engine), clock=clock, logger=logger)
    source = HttpxRateSource(
        transport=httpx.MockTransport(handler),
        logger=logger,
    )
    provider = RateProvider(store, source, logger=logger)
    yield store, provider, clock, requested, logger
    await engine.dispose()


@pytest.mark.asyncio
async def test_reports_over_recorded_expenses(ledger) -> None:
    store, provider, clock, requested, logger = ledger
    record = RecordExpenseUseCase(store, logger=logger)

    await record.execute(ExpenseDraft(200, "USD", "FOOD", "Groceries"))
    clock.current = datetime(2025, 9, 18, 12, 0, tzinfo=timezone.utc)
    await record.execute(ExpenseDraft(120, "GBP", "Education", "Books"))
    clock.current = datetime(2025, 11, 3, 12, 0, tzinfo=timezone.utc)
    await record.execute(ExpenseDraft(90, "EURO", "Travel", "Train"))

    report = await GetMonthlyReportUseCase(store, provider, logger=logger).execute(
        2025, 9, "USD"
    )
    categories = await GetCategoryBreakdownUseCase(
        store, provider, logger=logger
    ).execute(2025, 9, "USD")
    months = await GetYearlyBreakdownUseCase(store, provider, logger=logger).execute(
        2025, "USD"
    )

    assert [item.amount for item in report.costs] == [200, 120]
    assert [item.currency for item in report.costs] == ["USD", "GBP"]
    assert report.total.to_dict() == {"currency": "USD", "total": 400.0}
    assert [(c.category, c.amount) for c in categories] == [
        ("FOOD", 200.0),
        ("Education", 200.0),
    ]
    assert [m.amount for m in months] == [
        0, 0, 0, 0, 0, 0, 0, 0, 400.0, 0, 100.0, 0,
    ]
    assert requested == [DEFAULT_RATES_URL] * 3


@pytest.mark.asyncio
async def test_stored_override_redirects_fetches(ledger) -> None:
    store, provider, _, requested, logger = ledger
    manage = ManageRateSourceUseCase(store, provider, logger=logger)

    await manage.save_address(OVERRIDE)
    await provider.fetch_rates()
    await manage.reset()
    await provider.fetch_rates()

    assert requested == [OVERRIDE, DEFAULT_RATES_URL]
    assert await manage.current_address() == ""


@pytest.mark.asyncio
async def test_check_address_lists_quoted_currencies(ledger) -> None:
    _, provider, _, _, logger = ledger
    manage = ManageRateSourceUseCase(MagicMock(), provider, logger=logger)

    check = await manage.check_address(OVERRIDE)

    assert check.currencies == ["USD", "GBP", "ILS", "EURO"]
    assert check.is_complete
