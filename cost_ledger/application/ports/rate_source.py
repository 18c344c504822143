"""Port for retrieving exchange rate tables."""

from typing import Protocol


class RateSourcePort(Protocol):
    """Port retrieving a rate table from an address.

    Implementations perform exactly one retrieval per call and raise
    RateFetchError or RateFormatError on failures.
    """

    async def fetch_rates(self, address: str) -> dict[str, float]:
        """Return the validated rate table published at the address."""


__all__ = ["RateSourcePort"]
