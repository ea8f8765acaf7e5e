"""Funding and interest rate computation for the three position sides.

Reproduces the on-chain accounting step by step in Big6 arithmetic so values
match chain state exactly, including every truncation.

Sign convention: positive = side pays, negative = side receives.

Every division is preceded by an explicit zero guard that resolves to ZERO;
a DivisionByZero from the arithmetic layer must never surface from here.
"""

import time

from ratecore.fixed_point import Big6
from ratecore.funding.models import FundingAndInterest, MarketSnapshot, SideRates
from ratecore.interest.curve import compute_interest_rate
from ratecore.logging import get_logger

logger = get_logger(__name__)

#: Utilization cap (100x), also used when there is no maker liquidity at all.
MAX_UTILIZATION = Big6.ONE.mul_int(100)


def compute_funding_and_interest(
    snapshot: MarketSnapshot,
    now_seconds: int | None = None,
) -> FundingAndInterest:
    """Calculate funding and interest rates for the long, short and maker sides.

    Args:
        snapshot: Market state as fetched by the caller.
        now_seconds: Evaluation time in unix seconds. Defaults to the wall
            clock; pass it explicitly for reproducible results.

    Returns:
        FundingAndInterest with combined, funding-only and interest-only rates
        per side, plus the intermediate breakdown.
    """
    if now_seconds is None:
        now_seconds = int(time.time())

    p_accumulator = snapshot.global_state.p_accumulator
    funding_fee = snapshot.parameter.funding_fee
    interest_fee = snapshot.parameter.interest_fee
    p_controller = snapshot.risk_parameter.p_controller
    utilization_curve = snapshot.risk_parameter.utilization_curve
    efficiency_limit = snapshot.risk_parameter.efficiency_limit
    maker = snapshot.next_position.maker
    long = snapshot.next_position.long
    short = snapshot.next_position.short

    # Funding
    # A negative delta (snapshot ahead of the clock) is passed through as-is.
    # The raw second count enters the fixed-point mul as a Big6 operand.
    time_delta = now_seconds - snapshot.next_position.timestamp
    skew_rate = p_accumulator.skew / p_controller.k if p_controller.k else Big6.ZERO
    market_funding = p_accumulator.value + Big6(time_delta) * skew_rate
    funding = market_funding.min(p_controller.max).max(p_controller.min)

    major = long.max(short)
    minor = long.min(short)

    # Interest
    net_utilization = major / (maker + minor) if maker + minor > Big6.ZERO else Big6.ZERO
    efficiency_utilization = major * (efficiency_limit / maker) if maker > Big6.ZERO else MAX_UTILIZATION
    utilization = MAX_UTILIZATION.min(net_utilization.max(efficiency_utilization))
    interest_rate = compute_interest_rate(utilization_curve, utilization)

    taker_notional = long + short
    applicable_notional = maker.min(taker_notional)
    interest = (
        (interest_rate * applicable_notional) / taker_notional if taker_notional > Big6.ZERO else Big6.ZERO
    )
    total_interest_fee = interest * interest_fee

    # Fee split between the two taker sides; raw halving truncates like the chain.
    total_funding_fee = (funding.abs() * funding_fee).div_int(2)
    long_funding = funding + total_funding_fee
    short_funding = -funding + total_funding_fee

    # Makers take the unbalanced side of funding, capped at 100% of their position.
    maker_util = ((long - short) / maker).clamp(-Big6.ONE, Big6.ONE) if maker > Big6.ZERO else Big6.ZERO
    maker_funding = maker_util * funding
    maker_funding_fee = maker_util.abs() * total_funding_fee
    maker_rate = -(maker_funding - maker_funding_fee + (interest - total_interest_fee))

    logger.debug(
        "funding_and_interest_computed",
        time_delta=time_delta,
        funding=str(funding),
        utilization=str(utilization),
        interest_rate=str(interest_rate),
        interest=str(interest),
        maker_util=str(maker_util),
    )

    return FundingAndInterest(
        long=long_funding + interest,
        short=short_funding + interest,
        maker=maker_rate,
        funding_rates=SideRates(
            long=funding + total_funding_fee,
            short=-funding + total_funding_fee,
            maker=-(maker_funding - maker_funding_fee),
        ),
        interest_rates=SideRates(
            long=interest,
            short=interest,
            maker=-(interest - total_interest_fee),
        ),
        funding=funding,
        total_funding_fee=total_funding_fee,
        utilization=utilization,
        interest_rate=interest_rate,
        interest=interest,
        total_interest_fee=total_interest_fee,
    )
