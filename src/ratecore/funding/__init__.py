"""Funding and interest rate engine for maker, long and short sides."""

from ratecore.funding.engine import MAX_UTILIZATION, compute_funding_and_interest
from ratecore.funding.models import (
    FundingAndInterest,
    GlobalState,
    MarketParameter,
    MarketSnapshot,
    PAccumulator,
    PController,
    Position,
    RiskParameter,
    SideRates,
)

__all__ = [
    "MAX_UTILIZATION",
    "FundingAndInterest",
    "GlobalState",
    "MarketParameter",
    "MarketSnapshot",
    "PAccumulator",
    "PController",
    "Position",
    "RiskParameter",
    "SideRates",
    "compute_funding_and_interest",
]
