"""Numeric rounding shared by every extracted utility and probability."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from numbers import Rational, Real

from nashfinder.core.exceptions import InvalidArgumentError

# Decimal scale all extracted solver values are rounded to
ROUNDING_DECIMAL_SCALE = 2


def _to_decimal(value: Real | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    if isinstance(value, Rational):
        # Exact solvers report fractions such as Fraction(1, 3)
        return Decimal(int(value.numerator)) / Decimal(int(value.denominator))
    return Decimal(str(float(value)))


def round_number_to(
    value: Real | Decimal, scale: int = ROUNDING_DECIMAL_SCALE
) -> float:
    """Round a number half-up to a fixed number of decimal places.

    Floats are rounded from their shortest decimal representation, so
    ``round_number_to(0.125)`` is ``0.13`` and not the ``0.12`` that
    binary rounding of the underlying double would give. Rationals such
    as ``fractions.Fraction`` are converted exactly.

    Args:
        value: Number to round.
        scale: Decimal places to keep. Must be non-negative.

    Returns:
        The rounded value as a float.
    """
    if scale < 0:
        raise InvalidArgumentError(f"scale must be >= 0, got {scale}")
    exponent = Decimal(1).scaleb(-scale)
    return float(_to_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))
