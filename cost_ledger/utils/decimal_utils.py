"""Helpers for rounding monetary floats."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def round_money(value: float) -> float:
    """Round a float to two decimal places, halves away from zero.

    The float's shortest decimal representation is rounded, so ``2.675``
    becomes ``2.68``.

    Args:
        value: Finite amount to round.

    Returns:
        float: Rounded amount.
    """
    return float(Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP))


__all__ = ["round_money"]
