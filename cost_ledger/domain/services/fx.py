"""Domain services for rate tables and currency conversion.

Rate tables map a currency code to its value against one implicit base
currency, so any two quoted codes convert through that base.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from logging import Logger
import math

from cost_ledger.domain.constants import EURO_ALIASES
from cost_ledger.domain.errors import RateFormatError


@dataclass(frozen=True)
class Converted:
    """Amount successfully expressed in the target currency."""

    value: float


@dataclass(frozen=True)
class Unconverted:
    """Amount the conversion could not translate.

    Attributes:
        value: Fallback value used by aggregates.
        reason: Short description of why the conversion was skipped.
    """

    value: float
    reason: str


def is_finite_number(value) -> bool:
    """Return True for int/float values that are neither NaN nor infinite."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def normalize_rates(rates: Mapping[str, float]) -> dict[str, float]:
    """Return a copy of the table where both euro aliases resolve.

    When only one alias is quoted the other one is added with the same value.
    Tables quoting both aliases, or neither, are copied unchanged.

    Args:
        rates: Rate table as fetched from a rate source.

    Returns:
        dict[str, float]: Normalized copy of the table.
    """
    normalized = dict(rates)
    short_code, long_code = EURO_ALIASES
    if long_code in normalized and short_code not in normalized:
        normalized[short_code] = normalized[long_code]
    if short_code in normalized and long_code not in normalized:
        normalized[long_code] = normalized[short_code]
    return normalized


def try_convert(
    amount,
    from_code: str,
    to_code: str,
    rates: Mapping[str, float],
) -> Converted | Unconverted:
    """Convert an amount and report whether the conversion happened.

    Non-finite amounts degrade to zero, even between identical codes, so a
    single bad record cannot poison an aggregate.

    Args:
        amount: Amount expressed in ``from_code``.
        from_code: Currency code of the amount.
        to_code: Requested currency code.
        rates: Rate table against the base currency.

    Returns:
        Converted | Unconverted: Tagged conversion outcome.
    """
    if not is_finite_number(amount):
        return Unconverted(value=0.0, reason=f"invalid amount {amount!r}")
    if from_code == to_code:
        return Converted(value=amount)

    normalized = normalize_rates(rates)
    from_rate = normalized.get(from_code)
    to_rate = normalized.get(to_code)
    if from_rate is None or to_rate is None:
        return Unconverted(
            value=amount,
            reason=f"missing exchange rate for {from_code} or {to_code}",
        )
    if not from_rate:
        return Unconverted(
            value=amount,
            reason=f"zero exchange rate for {from_code}",
        )
    return Converted(value=amount / from_rate * to_rate)


def convert_amount(
    amount,
    from_code: str,
    to_code: str,
    rates: Mapping[str, float],
    logger: Logger | None = None,
) -> float:
    """Convert an amount through the base currency of the rate table.

    Identical codes return the amount untouched without any lookup. Invalid
    amounts return 0 and missing rates return the amount unconverted.

    Args:
        amount: Amount expressed in ``from_code``.
        from_code: Currency code of the amount.
        to_code: Requested currency code.
        rates: Rate table against the base currency.
        logger: Optional logger used to report degraded conversions.

    Returns:
        float: Converted amount, or the documented fallback value.
    """
    if from_code == to_code:
        return amount
    outcome = try_convert(amount, from_code, to_code, rates)
    if isinstance(outcome, Unconverted) and logger is not None:
        logger.warning(f"Conversion skipped: {outcome.reason}")
    return outcome.value


def validate_rate_table(payload) -> dict[str, float]:
    """Check that a decoded payload is a flat mapping of code to number.

    Args:
        payload: Decoded JSON document returned by a rate source.

    Returns:
        dict[str, float]: Validated rate table.

    Raises:
        RateFormatError: If the payload is not a mapping of string codes to
            numeric values.
    """
    if not isinstance(payload, Mapping):
        raise RateFormatError(
            f"Invalid exchange rates format: expected an object, "
            f"got {type(payload).__name__}"
        )
    table: dict[str, float] = {}
    for code, value in payload.items():
        if not isinstance(code, str) or not is_finite_number(value):
            raise RateFormatError(
                f"Invalid exchange rate entry: {code!r} -> {value!r}"
            )
        table[code] = value
    return table


__all__ = [
    "Converted",
    "Unconverted",
    "is_finite_number",
    "normalize_rates",
    "try_convert",
    "convert_amount",
    "validate_rate_table",
]
