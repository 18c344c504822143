"""Domain errors raised by the cost ledger."""


class CostLedgerError(Exception):
    """Base class for every error raised by the cost ledger."""


class StoreError(CostLedgerError):
    """Raised when the record store cannot complete an operation."""


class StoreReadError(StoreError):
    """Raised when the record store is unavailable or returns corrupted data."""


class StoreWriteError(StoreError):
    """Raised when the record store rejects a write."""


class RateProviderError(CostLedgerError):
    """Base class for rate retrieval failures."""


class RateFetchError(RateProviderError):
    """Raised when the rate source cannot be retrieved.

    Attributes:
        address: Address that was requested.
        status_code: HTTP status code when the transport returned one.
    """

    def __init__(
        self,
        message: str,
        address: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.address = address
        self.status_code = status_code


class RateFormatError(RateProviderError):
    """Raised when a rate payload is not a flat mapping of code to number."""


class InvalidRateSourceError(CostLedgerError, ValueError):
    """Raised when a rate source address cannot be stored."""


__all__ = [
    "CostLedgerError",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    "RateProviderError",
    "RateFetchError",
    "RateFormatError",
    "InvalidRateSourceError",
]
