"""
Exception hierarchy for decimal-units.
"""

from typing import Dict, Any
from datetime import datetime
from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels."""
    CRITICAL = "critical"      # Programmer errors, never recovered from
    MEDIUM = "medium"


class ErrorCategory(Enum):
    """Error categories for classification."""
    CONTRACT = "contract"           # Broken operation preconditions
    VALIDATION = "validation"       # Input validation errors


class QuantityError(Exception):
    """Base exception for decimal-units errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.VALIDATION,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        recoverable: bool = True,
        metadata: Dict[str, Any] = None
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.recoverable = recoverable
        self.metadata = metadata or {}
        self.timestamp = datetime.now()


class ContractViolation(QuantityError, AssertionError):
    """
    A broken precondition.

    Raised for programmer errors only. Callers that want graceful handling
    must check convertibility before calling.
    """

    def __init__(self, message: str, metadata: Dict[str, Any] = None):
        super().__init__(
            message,
            category=ErrorCategory.CONTRACT,
            severity=ErrorSeverity.CRITICAL,
            recoverable=False,
            metadata=metadata
        )


class IncompatibleUnitsError(ContractViolation):
    """Units of different dimensions used where conversion is required."""

    def __init__(self, source, target, operation: str):
        super().__init__(
            f"Cannot {operation}: {source} is not convertible to {target}",
            metadata={
                'source_unit': str(source),
                'target_unit': str(target),
                'operation': operation
            }
        )
        self.source = source
        self.target = target
        self.operation = operation


class InvalidPrecisionError(ContractViolation):
    """Negative rounding precision."""

    def __init__(self, precision: int):
        super().__init__(
            f"Rounding precision must be >= 0, got {precision}",
            metadata={'precision': precision}
        )
        self.precision = precision
