"""Jump-rate utilization curve (3-segment piecewise linear).

Maps a utilization ratio (Big6, fraction of ONE) to an annualized interest
rate. The evaluator does not clamp utilization; the funding engine caps it at
100x before calling.

Curve shape:
    u < 0                    -> min_rate
    0 <= u < target          -> min_rate .. target_rate
    target <= u < ONE        -> target_rate .. max_rate
    u >= ONE                 -> max_rate
"""

from dataclasses import dataclass

from ratecore.exceptions import OutOfBounds
from ratecore.fixed_point import Big6


@dataclass(frozen=True)
class UtilizationCurve:
    """Per-market utilization curve parameters, all Big6."""

    min_rate: Big6
    target_rate: Big6
    max_rate: Big6
    target_utilization: Big6

    def __post_init__(self) -> None:
        if not Big6.ZERO < self.target_utilization < Big6.ONE:
            raise ValueError(
                f"target_utilization must lie strictly between 0 and 1: {self.target_utilization}"
            )


def linear_interpolation(start_x: Big6, start_y: Big6, end_x: Big6, end_y: Big6, target_x: Big6) -> Big6:
    """Interpolate between ``(start_x, start_y)`` and ``(end_x, end_y)`` at ``target_x``.

    The x-ratio is computed with a single Big6 division and then applied to
    the y-range with a single Big6 multiply, so truncation matches the
    on-chain curve math step for step.

    Raises:
        OutOfBounds: If ``target_x`` lies outside ``[start_x, end_x]``.
    """
    if target_x < start_x or target_x > end_x:
        raise OutOfBounds(f"interpolation target {target_x} outside [{start_x}, {end_x}]")

    x_range = end_x - start_x
    y_range = end_y - start_y
    x_ratio = (target_x - start_x) / x_range
    return y_range * x_ratio + start_y


def compute_interest_rate(curve: UtilizationCurve, utilization: Big6) -> Big6:
    """Evaluate ``curve`` at ``utilization``."""
    if utilization < Big6.ZERO:
        return curve.min_rate

    if utilization < curve.target_utilization:
        return linear_interpolation(
            Big6.ZERO, curve.min_rate, curve.target_utilization, curve.target_rate, utilization
        )

    if utilization < Big6.ONE:
        return linear_interpolation(
            curve.target_utilization, curve.target_rate, Big6.ONE, curve.max_rate, utilization
        )

    return curve.max_rate
