"""Conversions between precisions, raw decimal counts and decimal strings.

``big6_to_big18`` is exact; ``big18_to_big6`` and every scale reduction
truncate toward zero, the same way the on-chain ``toDecimals`` does.
String parsing goes through ``decimal.Decimal`` so no float ever touches a
value.
"""

from decimal import Decimal, InvalidOperation
from typing import TypeVar

from ratecore.fixed_point.scaled import Big6, Big18, ScaledInteger, trunc_div

T = TypeVar("T", bound=ScaledInteger)

_PRECISION_GAP = 10 ** (Big18.DECIMALS - Big6.DECIMALS)


def big6_to_big18(value: Big6) -> Big18:
    """Widen a 6-decimal value to 18 decimals (lossless)."""
    if not isinstance(value, Big6):
        raise TypeError(f"expected Big6, got {type(value).__name__}")
    return Big18(value.raw * _PRECISION_GAP)


def big18_to_big6(value: Big18) -> Big6:
    """Narrow an 18-decimal value to 6 decimals, truncating toward zero."""
    if not isinstance(value, Big18):
        raise TypeError(f"expected Big18, got {type(value).__name__}")
    return Big6(trunc_div(value.raw, _PRECISION_GAP))


def _shift(amount: int, places: int) -> int:
    """Multiply by ``10**places``; negative places divide, truncating toward zero."""
    if places >= 0:
        return amount * 10**places
    return trunc_div(amount, 10 ** (-places))


def to_decimals(value: ScaledInteger, decimals: int) -> int:
    """Rescale a fixed-point value to an integer carrying ``decimals`` digits.

    Reducing the scale truncates toward zero; increasing it is exact.
    """
    return _shift(value.raw, decimals - value.DECIMALS)


def from_decimals(amount: int, decimals: int, cls: type[T]) -> T:
    """Interpret ``amount`` as a ``decimals``-digit integer and lift it into ``cls``.

    Example: ``from_decimals(5, 0, Big18)`` is ``Big18('5')``.
    """
    return cls(_shift(amount, cls.DECIMALS - decimals))


def from_float_string(text: str, cls: type[T]) -> T:
    """Parse a decimal string such as ``"0.02"`` or ``"-1.5e-3"`` exactly.

    Digits beyond the target precision are truncated toward zero.

    Raises:
        ValueError: If ``text`` is not a finite decimal number.
    """
    try:
        parsed = Decimal(text.strip())
    except InvalidOperation as exc:
        raise ValueError(f"not a decimal number: {text!r}") from exc
    if not parsed.is_finite():
        raise ValueError(f"not a finite decimal number: {text!r}")

    # Work on the digit tuple: Decimal arithmetic would round at 28 digits.
    sign, digits, exponent = parsed.as_tuple()
    coefficient = int("".join(map(str, digits)))
    raw = _shift(coefficient, exponent + cls.DECIMALS)
    return cls(-raw if sign else raw)


def to_float_string(value: ScaledInteger) -> str:
    """Exact decimal string with trailing zeros trimmed (``Big6(20000)`` -> ``"0.02"``)."""
    return str(value)
