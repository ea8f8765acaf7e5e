"""Decode external payloads into domain records and encode results.

Payloads follow the indexer's camelCase JSON shape. Every fixed-point value
travels as a raw integer (e.g. ``"20000"`` for 0.02 at 6 decimals), preferably
as a decimal string: JSON floats cannot carry 18-decimal values without loss,
so float and bool inputs are rejected outright.

Unknown keys are ignored; real snapshots carry many more fields than the
engine reads.
"""

from typing import Annotated, Any, TypeVar

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from ratecore.exceptions import PayloadError
from ratecore.fixed_point import Big6, Big18
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
from ratecore.interest.curve import UtilizationCurve
from ratecore.logging import get_logger

logger = get_logger(__name__)


def _reject_lossy(value: Any) -> Any:
    if isinstance(value, (bool, float)):
        raise ValueError("fixed-point values must be integers or decimal-integer strings")
    return value


RawInt = Annotated[int, BeforeValidator(_reject_lossy)]

M = TypeVar("M", bound=BaseModel)


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class PAccumulatorPayload(_Payload):
    value: RawInt = Field(validation_alias=AliasChoices("_value", "value"))
    skew: RawInt = Field(validation_alias=AliasChoices("_skew", "skew"))


class GlobalPayload(_Payload):
    p_accumulator: PAccumulatorPayload = Field(alias="pAccumulator")


class ParameterPayload(_Payload):
    funding_fee: RawInt = Field(alias="fundingFee")
    interest_fee: RawInt = Field(alias="interestFee")


class PControllerPayload(_Payload):
    k: RawInt
    min: RawInt
    max: RawInt


class CurvePayload(_Payload):
    min_rate: RawInt = Field(alias="minRate")
    target_rate: RawInt = Field(alias="targetRate")
    max_rate: RawInt = Field(alias="maxRate")
    target_utilization: RawInt = Field(alias="targetUtilization")


class RiskParameterPayload(_Payload):
    p_controller: PControllerPayload = Field(alias="pController")
    utilization_curve: CurvePayload = Field(alias="utilizationCurve")
    efficiency_limit: RawInt = Field(alias="efficiencyLimit")


class PositionPayload(_Payload):
    maker: RawInt
    long: RawInt
    short: RawInt
    timestamp: RawInt


class SnapshotPayload(_Payload):
    global_state: GlobalPayload = Field(alias="global")
    parameter: ParameterPayload
    risk_parameter: RiskParameterPayload = Field(alias="riskParameter")
    next_position: PositionPayload = Field(alias="nextPosition")


class FundingRequest(_Payload):
    snapshot: SnapshotPayload
    now: RawInt | None = None


class InterestRateRequest(_Payload):
    curve: CurvePayload
    utilization: RawInt


class PayoffRequest(_Payload):
    payoff: str
    value: RawInt
    decimals: int | None = None


def parse_payload(model: type[M], data: Any) -> M:
    """Validate ``data`` against ``model``.

    Raises:
        PayloadError: If validation fails.
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.warning("payload_rejected", model=model.__name__, errors=exc.error_count())
        raise PayloadError(f"invalid {model.__name__}: {exc}") from exc


def curve_from_payload(payload: CurvePayload) -> UtilizationCurve:
    try:
        return UtilizationCurve(
            min_rate=Big6(payload.min_rate),
            target_rate=Big6(payload.target_rate),
            max_rate=Big6(payload.max_rate),
            target_utilization=Big6(payload.target_utilization),
        )
    except ValueError as exc:
        raise PayloadError(str(exc)) from exc


def snapshot_from_payload(payload: SnapshotPayload) -> MarketSnapshot:
    """Build a MarketSnapshot from a validated payload."""
    accumulator = payload.global_state.p_accumulator
    risk = payload.risk_parameter
    position = payload.next_position
    try:
        next_position = Position(
            maker=Big6(position.maker),
            long=Big6(position.long),
            short=Big6(position.short),
            timestamp=position.timestamp,
        )
    except ValueError as exc:
        raise PayloadError(str(exc)) from exc

    return MarketSnapshot(
        global_state=GlobalState(
            p_accumulator=PAccumulator(value=Big6(accumulator.value), skew=Big6(accumulator.skew)),
        ),
        parameter=MarketParameter(
            funding_fee=Big6(payload.parameter.funding_fee),
            interest_fee=Big6(payload.parameter.interest_fee),
        ),
        risk_parameter=RiskParameter(
            p_controller=PController(
                k=Big6(risk.p_controller.k),
                min=Big6(risk.p_controller.min),
                max=Big6(risk.p_controller.max),
            ),
            utilization_curve=curve_from_payload(risk.utilization_curve),
            efficiency_limit=Big6(risk.efficiency_limit),
        ),
        next_position=next_position,
    )


def decode_snapshot(data: Any) -> MarketSnapshot:
    """Validate a raw JSON-style mapping and build a MarketSnapshot."""
    return snapshot_from_payload(parse_payload(SnapshotPayload, data))


def encode_value(value: Big6 | Big18) -> str:
    """Raw integer as a decimal string (full precision)."""
    return str(value.raw)


def _encode_sides(rates: SideRates) -> dict[str, str]:
    return {
        "long": encode_value(rates.long),
        "short": encode_value(rates.short),
        "maker": encode_value(rates.maker),
    }


def funding_and_interest_to_payload(result: FundingAndInterest) -> dict[str, Any]:
    """Encode an engine result with every value as a raw decimal-integer string."""
    return {
        "long": encode_value(result.long),
        "short": encode_value(result.short),
        "maker": encode_value(result.maker),
        "fundingRates": _encode_sides(result.funding_rates),
        "interestRates": _encode_sides(result.interest_rates),
        "breakdown": {
            "funding": encode_value(result.funding),
            "totalFundingFee": encode_value(result.total_funding_fee),
            "utilization": encode_value(result.utilization),
            "interestRate": encode_value(result.interest_rate),
            "interest": encode_value(result.interest),
            "totalInterestFee": encode_value(result.total_interest_fee),
        },
    }
