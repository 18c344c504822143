"""Use case to read, change, reset, and probe the rate source address."""

from cost_ledger.application.ports.expense_store import SettingsStorePort
from cost_ledger.application.use_cases.rate_provider import RateProvider
from cost_ledger.domain.constants import RATE_SOURCE_SETTING_KEY
from cost_ledger.domain.models import RateSourceCheck
from cost_ledger.domain.services.rate_sources import (
    find_missing_currencies,
    validate_source_address,
)
from cost_ledger.infrastructure.logging.logger import get_app_logger


class ManageRateSourceUseCase:
    """Manage the user override of the rate source address.

    An empty stored value means the default address is used.
    """

    def __init__(
        self,
        settings_store: SettingsStorePort,
        rate_provider: RateProvider,
        logger=None,
        setting_key: str = RATE_SOURCE_SETTING_KEY,
    ) -> None:
        """Initialize the use case.

        Args:
            settings_store: Port holding the override.
            rate_provider: Provider used to probe addresses.
            logger: Optional logger compatible with logging.Logger-like API.
            setting_key: Settings key holding the override.
        """
        self._settings_store = settings_store
        self._rate_provider = rate_provider
        self._logger = logger or get_app_logger()
        self._setting_key = setting_key

    async def current_address(self) -> str:
        """Return the stored override, or an empty string when unset."""
        value = await self._settings_store.get_setting(self._setting_key)
        return value or ""

    async def save_address(self, address: str) -> str:
        """Validate and store a new override.

        Args:
            address: Absolute http(s) URL, or an empty string.

        Returns:
            str: The value that was stored.

        Raises:
            InvalidRateSourceError: If the address is not a valid URL.
            StoreWriteError: If the store rejects the write.
        """
        cleaned = validate_source_address(address)
        await self._settings_store.put_setting(self._setting_key, cleaned)
        self._logger.info(
            f"Rate source set to {cleaned or self._rate_provider.default_address}"
        )
        return cleaned

    async def reset(self) -> None:
        """Store an empty override so the default address is used."""
        await self._settings_store.put_setting(self._setting_key, "")
        self._logger.info("Rate source reset to default")

    async def check_address(self, address: str) -> RateSourceCheck:
        """Fetch an address once and report which currencies it lacks.

        Args:
            address: Address to probe.

        Returns:
            RateSourceCheck: Quoted and missing currencies.

        Raises:
            InvalidRateSourceError: If the address is not a valid URL.
            RateFetchError: If the address cannot be retrieved.
            RateFormatError: If the payload has an unexpected shape.
        """
        cleaned = validate_source_address(address)
        if not cleaned:
            cleaned = self._rate_provider.default_address
        rates = await self._rate_provider.fetch_rates(cleaned)
        missing = find_missing_currencies(rates)
        if missing:
            self._logger.warning(
                f"Rate source {cleaned} is missing currencies: "
                f"{', '.join(missing)}"
            )
        return RateSourceCheck(
            address=cleaned,
            currencies=list(rates),
            missing_currencies=missing,
        )


__all__ = ["ManageRateSourceUseCase", "RateSourceCheck"]
