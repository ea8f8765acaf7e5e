"""Market snapshot and rate result records for the funding engine.

CRITICAL: every value is a Big6 fixed-point number. Never use float.

Snapshots are assembled by the data-fetching layer once per query and are
never mutated here. Field names follow the on-chain structs in snake_case.
"""

from dataclasses import dataclass

from ratecore.fixed_point import Big6
from ratecore.interest.curve import UtilizationCurve


@dataclass(frozen=True)
class PAccumulator:
    """Running p-controller funding state, owned by the upstream indexer."""

    value: Big6
    skew: Big6


@dataclass(frozen=True)
class GlobalState:
    p_accumulator: PAccumulator


@dataclass(frozen=True)
class MarketParameter:
    """Protocol fee shares taken from funding and interest."""

    funding_fee: Big6
    interest_fee: Big6


@dataclass(frozen=True)
class PController:
    """Funding controller gain (``k``) and rate bounds."""

    k: Big6
    min: Big6
    max: Big6


@dataclass(frozen=True)
class RiskParameter:
    p_controller: PController
    utilization_curve: UtilizationCurve
    efficiency_limit: Big6


@dataclass(frozen=True)
class Position:
    """Aggregate open position per side. ``timestamp`` is in seconds."""

    maker: Big6
    long: Big6
    short: Big6
    timestamp: int

    def __post_init__(self) -> None:
        for name in ("maker", "long", "short"):
            if getattr(self, name) < Big6.ZERO:
                raise ValueError(f"{name} must be non-negative: {getattr(self, name)}")


@dataclass(frozen=True)
class MarketSnapshot:
    """Subset of a chain market snapshot consumed by the funding engine."""

    global_state: GlobalState
    parameter: MarketParameter
    risk_parameter: RiskParameter
    next_position: Position


@dataclass(frozen=True)
class SideRates:
    """One rate per position side. Positive = side pays, negative = side receives."""

    long: Big6
    short: Big6
    maker: Big6


@dataclass(frozen=True)
class FundingAndInterest:
    """Total, funding and interest rates per side, plus the intermediate values.

    ``long``/``short``/``maker`` are funding + interest combined.
    """

    long: Big6
    short: Big6
    maker: Big6
    funding_rates: SideRates
    interest_rates: SideRates

    # Breakdown
    funding: Big6  # clamped controller rate, before fees
    total_funding_fee: Big6
    utilization: Big6
    interest_rate: Big6  # curve rate at utilization
    interest: Big6  # interest_rate scaled to the notional that is actually borrowed
    total_interest_fee: Big6
