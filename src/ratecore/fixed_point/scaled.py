"""Scaled-integer fixed-point numbers at 6 and 18 decimals.

A value is a plain Python int interpreted as ``raw * 10**-DECIMALS``. Python
ints are arbitrary precision, so ``a * b`` never overflows before the
compensating divide.

Multiply and divide truncate toward zero, matching the on-chain mulDiv
semantics. Python's ``//`` floors toward -inf, which differs for negative
operands, so every division goes through :func:`trunc_div`.

``Big6`` and ``Big18`` are distinct types. Mixing them in arithmetic or
ordering raises ``TypeError``; use :mod:`ratecore.fixed_point.convert` to cross
precisions.
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Self

from ratecore.exceptions import DivisionByZero, DomainError


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero.

    Raises:
        DivisionByZero: If ``denominator`` is zero.
    """
    if denominator == 0:
        raise DivisionByZero(f"division of {numerator} by zero")
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


@dataclass(frozen=True, repr=False)
class ScaledInteger:
    """Shared implementation of the two precisions; instantiate Big6 or Big18."""

    raw: int

    DECIMALS: ClassVar[int]
    BASE: ClassVar[int]

    def __post_init__(self) -> None:
        if not isinstance(self.raw, int) or isinstance(self.raw, bool):
            raise TypeError(f"{type(self).__name__} raw value must be int, got {type(self.raw).__name__}")

    def _same(self, other: object) -> Self:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}; "
                "convert explicitly first"
            )
        return other  # type: ignore[return-value]

    # -- arithmetic ----------------------------------------------------------

    def add(self, other: Self) -> Self:
        return type(self)(self.raw + self._same(other).raw)

    def sub(self, other: Self) -> Self:
        return type(self)(self.raw - self._same(other).raw)

    def mul(self, other: Self) -> Self:
        """``(a * b) / BASE``, truncated toward zero."""
        return type(self)(trunc_div(self.raw * self._same(other).raw, self.BASE))

    def div(self, other: Self) -> Self:
        """``(a * BASE) / b``, truncated toward zero.

        Raises:
            DivisionByZero: If ``other`` is zero.
        """
        return type(self)(trunc_div(self.raw * self.BASE, self._same(other).raw))

    def mul_int(self, factor: int) -> Self:
        """Multiply by a plain integer (no rescaling)."""
        return type(self)(self.raw * factor)

    def div_int(self, divisor: int) -> Self:
        """Divide by a plain integer, truncating toward zero."""
        return type(self)(trunc_div(self.raw, divisor))

    def min(self, other: Self) -> Self:
        return self if self.raw <= self._same(other).raw else other

    def max(self, other: Self) -> Self:
        return self if self.raw >= self._same(other).raw else other

    def abs(self) -> Self:
        return self if self.raw >= 0 else type(self)(-self.raw)

    def neg(self) -> Self:
        return type(self)(-self.raw)

    def sqrt(self) -> Self:
        """Integer square root of the raw representation.

        This is the on-chain library's sqrt: it does not rescale, so callers
        pre-multiply by the scale they need (see the power-two payoffs).

        Raises:
            DomainError: If the value is negative.
        """
        if self.raw < 0:
            raise DomainError(f"square root of negative value {self}")
        return type(self)(math.isqrt(self.raw))

    def clamp(self, lower: Self, upper: Self) -> Self:
        """``max(min(self, upper), lower)`` in that order."""
        return self.min(upper).max(lower)

    def cmp(self, other: Self) -> int:
        other_raw = self._same(other).raw
        return (self.raw > other_raw) - (self.raw < other_raw)

    def is_zero(self) -> bool:
        return self.raw == 0

    # -- operators -----------------------------------------------------------

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __neg__ = neg
    __abs__ = abs

    def __lt__(self, other: Self) -> bool:
        return self.raw < self._same(other).raw

    def __le__(self, other: Self) -> bool:
        return self.raw <= self._same(other).raw

    def __gt__(self, other: Self) -> bool:
        return self.raw > self._same(other).raw

    def __ge__(self, other: Self) -> bool:
        return self.raw >= self._same(other).raw

    def __bool__(self) -> bool:
        return self.raw != 0

    def __str__(self) -> str:
        sign = "-" if self.raw < 0 else ""
        whole, frac = divmod(abs(self.raw), self.BASE)
        frac_digits = str(frac).rjust(self.DECIMALS, "0").rstrip("0")
        return f"{sign}{whole}.{frac_digits}" if frac_digits else f"{sign}{whole}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"


class Big6(ScaledInteger):
    """Fixed-point number with 6 decimals (market accounting precision)."""

    DECIMALS: ClassVar[int] = 6
    BASE: ClassVar[int] = 10**6
    ZERO: ClassVar["Big6"]
    ONE: ClassVar["Big6"]


class Big18(ScaledInteger):
    """Fixed-point number with 18 decimals (index/oracle precision)."""

    DECIMALS: ClassVar[int] = 18
    BASE: ClassVar[int] = 10**18
    ZERO: ClassVar["Big18"]
    ONE: ClassVar["Big18"]


Big6.ZERO = Big6(0)
Big6.ONE = Big6(Big6.BASE)
Big18.ZERO = Big18(0)
Big18.ONE = Big18(Big18.BASE)
