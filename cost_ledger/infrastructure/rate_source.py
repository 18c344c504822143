"""HTTP rate source backed by httpx."""

import httpx

from cost_ledger.application.ports.rate_source import RateSourcePort
from cost_ledger.domain.errors import RateFetchError, RateFormatError
from cost_ledger.domain.services.fx import validate_rate_table
from cost_ledger.infrastructure.logging.logger import get_app_logger

DEFAULT_TIMEOUT_SECONDS = 10.0


class HttpxRateSource(RateSourcePort):
    """Retrieve rate tables published as flat JSON objects."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
        logger=None,
    ) -> None:
        """Initialize the source.

        Args:
            timeout: Transport timeout in seconds.
            transport: Optional httpx transport, used by tests.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._timeout = timeout
        self._transport = transport
        self._logger = logger or get_app_logger()

    async def fetch_rates(self, address: str) -> dict[str, float]:
        """Perform one GET request and validate the payload.

        Args:
            address: URL of the rate table.

        Returns:
            dict[str, float]: Validated rate table.

        Raises:
            RateFetchError: On transport errors or non-success statuses.
            RateFormatError: If the body is not a flat code-to-number object.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(address)
        except httpx.HTTPError as exc:
            self._logger.error(f"Exchange rate request to {address} failed: {exc}")
            raise RateFetchError(
                f"Failed to fetch exchange rates: {exc}",
                address=address,
            ) from exc

        if not response.is_success:
            self._logger.error(
                f"Exchange rate request to {address} returned "
                f"HTTP {response.status_code}"
            )
            raise RateFetchError(
                f"Failed to fetch exchange rates: HTTP {response.status_code}",
                address=address,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise RateFormatError(
                "Invalid exchange rates format received from server"
            ) from exc
        rates = validate_rate_table(payload)
        self._logger.info(f"Fetched {len(rates)} exchange rates from {address}")
        return rates


__all__ = ["HttpxRateSource", "DEFAULT_TIMEOUT_SECONDS"]
