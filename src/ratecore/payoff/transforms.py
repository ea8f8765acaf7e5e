"""Payoff transforms: project an 18-decimal index price onto a market payoff.

Each transform maps an index value (Big18) to the market's payoff value
(Big6), and its untransform maps a payoff value back to the index value at
6 decimals.

- linear: the payoff is the index itself.
- micro_power_two: payoff = index^2 / 1e6.
- centimilli_power_two: payoff = index^2 / 1e5.
- decimal_shift(d): payoff = index * 10^d (d may be negative).

The power-two untransforms are one-way approximations: the square root drops
the sign and the truncated remainder, and is only defined for non-negative
payoffs (a negative payoff raises DomainError).
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ratecore.exceptions import UnknownPayoffError
from ratecore.fixed_point import Big6, Big18, big18_to_big6, from_decimals


class PayoffKind(str, Enum):
    """Supported payoff curve families."""

    LINEAR = "linear"
    MICRO_POWER_TWO = "micro_power_two"
    CENTIMILLI_POWER_TWO = "centimilli_power_two"
    DECIMAL_SHIFT = "decimal_shift"


@dataclass(frozen=True)
class PayoffTransform:
    """A named transform/untransform pair."""

    name: str
    transform: Callable[[Big18], Big6]
    untransform: Callable[[Big6], Big6]


def _power_two(name: str, divisor: int) -> PayoffTransform:
    """Build ``index^2 / divisor`` and its square-root inverse."""
    divisor18 = from_decimals(divisor, 0, Big18)
    # Raw Big6 multiple that makes the raw isqrt land back on 6 decimals
    divisor6 = from_decimals(divisor, 0, Big6)

    def transform(value18: Big18) -> Big6:
        return big18_to_big6((value18 * value18) / divisor18)

    def untransform(value6: Big6) -> Big6:
        return Big6(value6.raw * divisor6.raw).sqrt()

    return PayoffTransform(name=name, transform=transform, untransform=untransform)


def _identity(value6: Big6) -> Big6:
    return value6


LINEAR = PayoffTransform(name=PayoffKind.LINEAR.value, transform=big18_to_big6, untransform=_identity)
MICRO_POWER_TWO = _power_two(PayoffKind.MICRO_POWER_TWO.value, 1_000_000)
CENTIMILLI_POWER_TWO = _power_two(PayoffKind.CENTIMILLI_POWER_TWO.value, 100_000)


def decimal_shift(decimals: int) -> PayoffTransform:
    """Payoff that shifts the index by ``10**decimals``.

    Positive ``decimals`` multiplies the index, negative divides it. The
    untransform applies the opposite shift in Big6 math, so it is an exact
    inverse only when the forward shift loses no digits.
    """
    base18 = from_decimals(10 ** abs(decimals), 0, Big18)
    base6 = from_decimals(10 ** abs(decimals), 0, Big6)

    def transform(value18: Big18) -> Big6:
        shifted = value18 / base18 if decimals < 0 else value18 * base18
        return big18_to_big6(shifted)

    def untransform(value6: Big6) -> Big6:
        return value6 * base6 if decimals < 0 else value6 / base6

    return PayoffTransform(
        name=f"{PayoffKind.DECIMAL_SHIFT.value}({decimals})",
        transform=transform,
        untransform=untransform,
    )


_FIXED_TRANSFORMS: dict[PayoffKind, PayoffTransform] = {
    PayoffKind.LINEAR: LINEAR,
    PayoffKind.MICRO_POWER_TWO: MICRO_POWER_TWO,
    PayoffKind.CENTIMILLI_POWER_TWO: CENTIMILLI_POWER_TWO,
}


def get_payoff_transform(kind: PayoffKind | str, decimals: int = 0) -> PayoffTransform:
    """Look up a transform by kind. ``decimals`` only applies to ``decimal_shift``.

    Raises:
        UnknownPayoffError: If ``kind`` is not a supported payoff name.
    """
    try:
        kind = PayoffKind(kind)
    except ValueError as exc:
        supported = ", ".join(k.value for k in PayoffKind)
        raise UnknownPayoffError(f"unknown payoff {kind!r}; supported: {supported}") from exc

    if kind is PayoffKind.DECIMAL_SHIFT:
        return decimal_shift(decimals)
    return _FIXED_TRANSFORMS[kind]
