"""
Error handling for decimal-units.

Contract violations (incompatible units, negative rounding precision) are
programmer errors: they fail fast with a non-recoverable exception that is
also an ``AssertionError``.
"""

from .exceptions import (
    ErrorSeverity, ErrorCategory, QuantityError, ContractViolation,
    IncompatibleUnitsError, InvalidPrecisionError
)
from .contracts import ensure_convertible, ensure_precision

__all__ = [
    "ErrorSeverity", "ErrorCategory", "QuantityError", "ContractViolation",
    "IncompatibleUnitsError", "InvalidPrecisionError",
    "ensure_convertible", "ensure_precision"
]
