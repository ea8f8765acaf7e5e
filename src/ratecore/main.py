"""Command-line entry point: run one ratecore operation over a JSON document.

Usage:
    ratecore funding_and_interest --input snapshot.json
    echo '{"curve": {...}, "utilization": "400000"}' | ratecore interest_rate

The result is printed to stdout as JSON with raw decimal-integer strings.
Errors are logged and reported with exit status 1.
"""

import argparse
import json
import sys
from typing import Any

from ratecore.config import AppSettings
from ratecore.exceptions import RateCoreError
from ratecore.logging import get_logger, setup_logging
from ratecore.operations import Operation, run_operation


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ratecore",
        description="Fixed-point funding, interest and payoff calculations.",
    )
    parser.add_argument("operation", choices=[op.value for op in Operation])
    parser.add_argument(
        "--input",
        "-i",
        default="-",
        help="JSON payload file ('-' reads stdin, the default)",
    )
    return parser


def _read_payload(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as handle:
        return json.load(handle)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the operation and print its JSON result."""
    args = _parser().parse_args(argv)

    settings = AppSettings()
    setup_logging(settings.log_level, settings.log_format)
    logger = get_logger("ratecore.main")

    try:
        payload = _read_payload(args.input)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("payload_unreadable", source=args.input, error=str(exc))
        print(f"error: cannot read payload: {exc}", file=sys.stderr)
        return 1

    try:
        result = run_operation(args.operation, payload, settings.cli)
    except RateCoreError as exc:
        logger.error("operation_failed", operation=args.operation, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=settings.cli.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
