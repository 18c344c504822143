"""Tests for the RateProvider."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from cost_ledger.application.use_cases.rate_provider import RateProvider
from cost_ledger.domain.constants import DEFAULT_RATES_URL, RATE_SOURCE_SETTING_KEY
from cost_ledger.domain.errors import RateFetchError, StoreReadError

OVERRIDE = "https://rates.example.com/custom.json"


def _build(setting_value=None, setting_error=None):
    settings_store = MagicMock()
    settings_store.get_setting = AsyncMock(
        return_value=setting_value,
        side_effect=setting_error,
    )
    rate_source = MagicMock()
    rate_source.fetch_rates = AsyncMock(return_value={"USD": 1})
    logger = MagicMock()
    provider = RateProvider(settings_store, rate_source, logger=logger)
    return provider, settings_store, rate_source, logger


@pytest.mark.asyncio
@pytest.mark.parametrize("stored", [None, ""])
async def test_resolve_uses_default_without_override(stored) -> None:
    """Absent and empty settings should both resolve to the default."""
    provider, settings_store, _, _ = _build(setting_value=stored)

    assert await provider.resolve_source_address() == DEFAULT_RATES_URL
    settings_store.get_setting.assert_awaited_once_with(RATE_SOURCE_SETTING_KEY)


@pytest.mark.asyncio
async def test_resolve_prefers_stored_override() -> None:
    provider, _, _, _ = _build(setting_value=OVERRIDE)

    assert await provider.resolve_source_address() == OVERRIDE


@pytest.mark.asyncio
async def test_resolve_absorbs_settings_read_failures() -> None:
    """An unreadable settings store must not block report generation."""
    provider, _, _, logger = _build(setting_error=StoreReadError("locked"))

    assert await provider.resolve_source_address() == DEFAULT_RATES_URL
    logger.warning.assert_called_once()


@pytest.mark.asyncio
async def test_fetch_rates_performs_one_retrieval_of_resolved_address() -> None:
    provider, _, rate_source, _ = _build(setting_value=OVERRIDE)

    rates = await provider.fetch_rates()

    assert rates == {"USD": 1}
    rate_source.fetch_rates.assert_awaited_once_with(OVERRIDE)


@pytest.mark.asyncio
async def test_fetch_rates_with_explicit_address_skips_settings() -> None:
    provider, settings_store, rate_source, _ = _build(setting_value=OVERRIDE)

    await provider.fetch_rates("https://other.example.com/r.json")

    settings_store.get_setting.assert_not_awaited()
    rate_source.fetch_rates.assert_awaited_once_with(
        "https://other.example.com/r.json"
    )


@pytest.mark.asyncio
async def test_fetch_errors_are_not_retried() -> None:
    provider, _, rate_source, _ = _build()
    rate_source.fetch_rates.side_effect = RateFetchError("HTTP 500", status_code=500)

    with pytest.raises(RateFetchError):
        await provider.fetch_rates()
    assert rate_source.fetch_rates.await_count == 1


def test_custom_default_address_is_exposed() -> None:
    provider = RateProvider(
        MagicMock(),
        MagicMock(),
        logger=MagicMock(),
        default_address="https://mirror.example.com/rates.json",
    )

    assert provider.default_address == "https://mirror.example.com/rates.json"
