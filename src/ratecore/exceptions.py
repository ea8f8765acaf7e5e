"""Custom exceptions for the fixed-point rate engine.

All arithmetic, curve and codec exceptions live here so every layer can
raise and catch them without importing each other.
"""


class RateCoreError(Exception):
    """Base exception for all ratecore errors."""


class DivisionByZero(RateCoreError, ZeroDivisionError):
    """Raised when a fixed-point division is attempted with a zero denominator."""


class DomainError(RateCoreError, ValueError):
    """Raised when an operand lies outside an operation's domain (e.g. sqrt of a negative)."""


class OutOfBounds(RateCoreError, ValueError):
    """Raised when an interpolation target falls outside its segment."""


class PayloadError(RateCoreError):
    """Raised when an external payload cannot be decoded into domain records."""


class UnknownOperationError(RateCoreError):
    """Raised when an operation name is not in the supported set."""


class UnknownPayoffError(RateCoreError):
    """Raised when a payoff transform name is not in the supported set."""
