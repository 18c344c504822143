"""Domain helpers for rate source addresses."""

from collections.abc import Mapping
from urllib.parse import urlparse

from cost_ledger.domain.constants import (
    EURO_ALIASES,
    REQUIRED_RATE_CURRENCIES,
)
from cost_ledger.domain.errors import InvalidRateSourceError


def choose_source_address(override: str | None, default: str) -> str:
    """Return the stored override, or the default when it is unset or empty.

    Args:
        override: Value of the rate source setting, None when absent.
        default: Built-in default address.

    Returns:
        str: Address to retrieve rates from.
    """
    return override or default


def validate_source_address(address: str) -> str:
    """Validate an address before it is stored as the rate source.

    The empty string is accepted and means "use the default address".

    Args:
        address: Raw address entered by the user.

    Returns:
        str: Address stripped of surrounding whitespace.

    Raises:
        InvalidRateSourceError: If the address is not an absolute http(s) URL.
    """
    cleaned = address.strip()
    if not cleaned:
        return ""
    parsed = urlparse(cleaned)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidRateSourceError(f"Invalid rate source URL: {address}")
    return cleaned


def find_missing_currencies(rates: Mapping[str, float]) -> list[str]:
    """Return the expected currencies a rate table does not quote.

    Args:
        rates: Validated rate table.

    Returns:
        list[str]: Missing codes; the euro is reported as ``EUR/EURO``.
    """
    missing = [code for code in REQUIRED_RATE_CURRENCIES if code not in rates]
    if not any(alias in rates for alias in EURO_ALIASES):
        missing.append("/".join(EURO_ALIASES))
    return missing


__all__ = [
    "choose_source_address",
    "validate_source_address",
    "find_missing_currencies",
]
