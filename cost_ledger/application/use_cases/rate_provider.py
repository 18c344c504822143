"""Rate retrieval shared by the report use cases."""

from cost_ledger.application.ports.expense_store import SettingsStorePort
from cost_ledger.application.ports.rate_source import RateSourcePort
from cost_ledger.domain.constants import (
    DEFAULT_RATES_URL,
    RATE_SOURCE_SETTING_KEY,
)
from cost_ledger.domain.errors import StoreError
from cost_ledger.domain.services.rate_sources import choose_source_address
from cost_ledger.infrastructure.logging.logger import get_app_logger


class RateProvider:
    """Resolve the configured rate source and fetch a fresh rate table."""

    def __init__(
        self,
        settings_store: SettingsStorePort,
        rate_source: RateSourcePort,
        logger=None,
        default_address: str = DEFAULT_RATES_URL,
        setting_key: str = RATE_SOURCE_SETTING_KEY,
    ) -> None:
        """Initialize the provider.

        Args:
            settings_store: Port holding the user override.
            rate_source: Port performing the network retrieval.
            logger: Optional logger compatible with logging.Logger-like API.
            default_address: Address used when no override is stored.
            setting_key: Settings key holding the override.
        """
        self._settings_store = settings_store
        self._rate_source = rate_source
        self._logger = logger or get_app_logger()
        self._default_address = default_address
        self._setting_key = setting_key

    @property
    def default_address(self) -> str:
        """Address used when no override is stored."""
        return self._default_address

    async def resolve_source_address(self) -> str:
        """Return the override address, or the default one.

        Settings read failures are logged and resolve to the default.

        Returns:
            str: Address to retrieve rates from.
        """
        try:
            override = await self._settings_store.get_setting(
                self._setting_key
            )
        except StoreError as exc:
            self._logger.warning(
                f"Could not read rate source setting, using default: {exc}"
            )
            override = None
        return choose_source_address(override, self._default_address)

    async def fetch_rates(self, address: str | None = None) -> dict[str, float]:
        """Retrieve one rate table.

        Args:
            address: Address to use; resolved from settings when omitted.

        Returns:
            dict[str, float]: Validated rate table.

        Raises:
            RateFetchError: If the retrieval fails.
            RateFormatError: If the payload has an unexpected shape.
        """
        resolved = address or await self.resolve_source_address()
        self._logger.info(f"Fetching exchange rates from {resolved}")
        return await self._rate_source.fetch_rates(resolved)


__all__ = ["RateProvider"]
