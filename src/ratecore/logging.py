"""Structured logging for ratecore, built on structlog over stdlib logging.

Event names are snake_case with keyword context; fixed-point values are
logged as decimal strings so nothing is rounded through float formatting.

Loggers always wrap a stdlib ``logging.Logger``. Until the application calls
:func:`setup_logging`, events follow the stdlib defaults (nothing below
WARNING is emitted, nothing is ever written to stdout), so importing the
library never prints. Once configured, a single stderr handler renders both
structlog events and plain stdlib records, keeping stdout free for CLI
results.
"""

import logging
import sys
from typing import Literal

import structlog

LogFormat = Literal["console", "json"]


def setup_logging(log_level: str = "INFO", log_format: LogFormat = "console") -> None:
    """Route structlog through a single stderr handler on the root logger.

    Args:
        log_level: Standard level name; unknown names fall back to INFO.
        log_format: "console" for humans, "json" for log shippers.
    """
    # Applied to structlog events and, via foreign_pre_chain, to stdlib records.
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: structlog.types.Processor
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger ``name``.

    Processors are resolved lazily on first use, so module-level loggers pick
    up whatever :func:`setup_logging` configured later.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
