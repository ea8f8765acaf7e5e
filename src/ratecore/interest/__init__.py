"""Utilization-curve interest rate evaluation."""

from ratecore.interest.curve import UtilizationCurve, compute_interest_rate, linear_interpolation

__all__ = ["UtilizationCurve", "compute_interest_rate", "linear_interpolation"]
