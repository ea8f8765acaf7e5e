"""Payoff curve transforms between index (18-dec) and payoff (6-dec) values."""

from ratecore.payoff.transforms import (
    CENTIMILLI_POWER_TWO,
    LINEAR,
    MICRO_POWER_TWO,
    PayoffKind,
    PayoffTransform,
    decimal_shift,
    get_payoff_transform,
)

__all__ = [
    "CENTIMILLI_POWER_TWO",
    "LINEAR",
    "MICRO_POWER_TWO",
    "PayoffKind",
    "PayoffTransform",
    "decimal_shift",
    "get_payoff_transform",
]
