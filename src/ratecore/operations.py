"""Explicit registry of the operations ratecore exposes to callers.

Each Operation maps to exactly one handler in a fixed dispatch table. The
handlers validate a JSON-style payload, run the pure computation and encode
the result with raw decimal-integer strings.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any

import structlog

from ratecore.codec import (
    FundingRequest,
    InterestRateRequest,
    PayoffRequest,
    curve_from_payload,
    encode_value,
    funding_and_interest_to_payload,
    parse_payload,
    snapshot_from_payload,
)
from ratecore.config import CliSettings
from ratecore.exceptions import UnknownOperationError
from ratecore.fixed_point import Big6, Big18
from ratecore.funding.engine import compute_funding_and_interest
from ratecore.interest.curve import compute_interest_rate
from ratecore.logging import get_logger
from ratecore.payoff.transforms import PayoffTransform, get_payoff_transform

logger = get_logger(__name__)


class Operation(str, Enum):
    """Supported operations."""

    FUNDING_AND_INTEREST = "funding_and_interest"
    INTEREST_RATE = "interest_rate"
    PAYOFF_TRANSFORM = "payoff_transform"
    PAYOFF_UNTRANSFORM = "payoff_untransform"


def _funding_and_interest(data: Any, settings: CliSettings) -> dict[str, Any]:
    request = parse_payload(FundingRequest, data)
    snapshot = snapshot_from_payload(request.snapshot)
    result = compute_funding_and_interest(snapshot, now_seconds=request.now)
    return funding_and_interest_to_payload(result)


def _interest_rate(data: Any, settings: CliSettings) -> dict[str, Any]:
    request = parse_payload(InterestRateRequest, data)
    rate = compute_interest_rate(curve_from_payload(request.curve), Big6(request.utilization))
    return {"rate": encode_value(rate)}


def _payoff(request: PayoffRequest, settings: CliSettings) -> PayoffTransform:
    decimals = request.decimals if request.decimals is not None else settings.default_payoff_decimals
    return get_payoff_transform(request.payoff, decimals=decimals)


def _payoff_transform(data: Any, settings: CliSettings) -> dict[str, Any]:
    request = parse_payload(PayoffRequest, data)
    payoff = _payoff(request, settings)
    return {"payoff": payoff.name, "value": encode_value(payoff.transform(Big18(request.value)))}


def _payoff_untransform(data: Any, settings: CliSettings) -> dict[str, Any]:
    request = parse_payload(PayoffRequest, data)
    payoff = _payoff(request, settings)
    return {"payoff": payoff.name, "value": encode_value(payoff.untransform(Big6(request.value)))}


_HANDLERS: dict[Operation, Callable[[Any, CliSettings], dict[str, Any]]] = {
    Operation.FUNDING_AND_INTEREST: _funding_and_interest,
    Operation.INTEREST_RATE: _interest_rate,
    Operation.PAYOFF_TRANSFORM: _payoff_transform,
    Operation.PAYOFF_UNTRANSFORM: _payoff_untransform,
}


def resolve_operation(name: Operation | str) -> Operation:
    """Map a name onto an Operation.

    Raises:
        UnknownOperationError: If ``name`` is not supported.
    """
    try:
        return Operation(name)
    except ValueError as exc:
        supported = ", ".join(op.value for op in Operation)
        raise UnknownOperationError(f"unknown operation {name!r}; supported: {supported}") from exc


def run_operation(
    operation: Operation | str,
    data: Any,
    settings: CliSettings | None = None,
) -> dict[str, Any]:
    """Run one operation over a decoded JSON payload and return the encoded result."""
    if settings is None:
        settings = CliSettings()

    op = resolve_operation(operation)
    with structlog.contextvars.bound_contextvars(operation=op.value):
        logger.debug("operation_started")
        result = _HANDLERS[op](data, settings)
        logger.debug("operation_completed", keys=sorted(result))
    return result
