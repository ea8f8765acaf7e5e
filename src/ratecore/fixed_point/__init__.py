"""Scaled-integer fixed-point arithmetic at 6 and 18 decimals, plus conversions."""

from ratecore.fixed_point.convert import (
    big6_to_big18,
    big18_to_big6,
    from_decimals,
    from_float_string,
    to_decimals,
    to_float_string,
)
from ratecore.fixed_point.scaled import Big6, Big18, ScaledInteger, trunc_div

__all__ = [
    "Big6",
    "Big18",
    "ScaledInteger",
    "big6_to_big18",
    "big18_to_big6",
    "from_decimals",
    "from_float_string",
    "to_decimals",
    "to_float_string",
    "trunc_div",
]
