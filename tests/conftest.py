"""Shared test fixtures for the ratecore engine."""

from collections.abc import Callable

import pytest

from ratecore.config import AppSettings, CliSettings
from ratecore.fixed_point import Big6, from_float_string
from ratecore.funding.models import (
    GlobalState,
    MarketParameter,
    MarketSnapshot,
    PAccumulator,
    PController,
    Position,
    RiskParameter,
)
from ratecore.interest.curve import UtilizationCurve

#: Evaluation time used by snapshot fixtures (timestamp == now -> time_delta 0).
NOW = 1_700_000_000


def _b6(text: str) -> Big6:
    return from_float_string(text, Big6)


@pytest.fixture
def mock_settings() -> AppSettings:
    """Return AppSettings with test defaults (debug logging, compact output)."""
    return AppSettings(log_level="DEBUG", cli=CliSettings(indent=None))


@pytest.fixture
def curve() -> UtilizationCurve:
    """Curve with a knee at 80%: 1% -> 5% -> 100%."""
    return UtilizationCurve(
        min_rate=_b6("0.01"),
        target_rate=_b6("0.05"),
        max_rate=_b6("1"),
        target_utilization=_b6("0.8"),
    )


@pytest.fixture
def make_snapshot(curve: UtilizationCurve) -> Callable[..., MarketSnapshot]:
    """Factory for snapshots; defaults reproduce the worked funding scenario."""

    def _make(
        maker: str = "1000",
        long: str = "0.6",
        short: str = "0.2",
        value: str = "0.02",
        skew: str = "0",
        k: str = "40000",
        p_min: str = "-1.2",
        p_max: str = "1.2",
        funding_fee: str = "0.1",
        interest_fee: str = "0.1",
        efficiency_limit: str = "0.8",
        timestamp: int = NOW,
        utilization_curve: UtilizationCurve | None = None,
    ) -> MarketSnapshot:
        return MarketSnapshot(
            global_state=GlobalState(p_accumulator=PAccumulator(value=_b6(value), skew=_b6(skew))),
            parameter=MarketParameter(funding_fee=_b6(funding_fee), interest_fee=_b6(interest_fee)),
            risk_parameter=RiskParameter(
                p_controller=PController(k=_b6(k), min=_b6(p_min), max=_b6(p_max)),
                utilization_curve=utilization_curve or curve,
                efficiency_limit=_b6(efficiency_limit),
            ),
            next_position=Position(maker=_b6(maker), long=_b6(long), short=_b6(short), timestamp=timestamp),
        )

    return _make


@pytest.fixture
def snapshot_payload() -> dict:
    """Indexer-shaped JSON payload of the worked funding scenario (raw units)."""
    return {
        "global": {"pAccumulator": {"_value": "20000", "_skew": "0"}},
        "parameter": {"fundingFee": "100000", "interestFee": "100000", "makerFee": "0"},
        "riskParameter": {
            "pController": {"k": "40000000000", "min": "-1200000", "max": "1200000"},
            "utilizationCurve": {
                "minRate": "10000",
                "targetRate": "50000",
                "maxRate": "1000000",
                "targetUtilization": "800000",
            },
            "efficiencyLimit": "800000",
        },
        "nextPosition": {
            "maker": "1000000000",
            "long": "600000",
            "short": "200000",
            "timestamp": str(NOW),
        },
    }


@pytest.fixture
def now() -> int:
    """Evaluation time matching the snapshot fixtures' timestamp."""
    return NOW
