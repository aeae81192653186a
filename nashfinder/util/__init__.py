"""Combinatorial and numeric helpers."""

from nashfinder.util.math import ROUNDING_DECIMAL_SCALE, round_number_to
from nashfinder.util.sets import cartesian_product, power_set

__all__ = [
    "ROUNDING_DECIMAL_SCALE",
    "cartesian_product",
    "power_set",
    "round_number_to",
]
