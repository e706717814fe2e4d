"""
Precondition checks shared by quantity operations.
"""

from decimal_units.error_handling.exceptions import (
    IncompatibleUnitsError, InvalidPrecisionError
)
from decimal_units.utils.logging import get_enhanced_logger, LogCategory

logger = get_enhanced_logger(__name__, LogCategory.CONTRACT)


def ensure_convertible(source, target, operation: str) -> None:
    """
    Fail fast unless ``source`` can be converted to ``target``.

    Args:
        source: Unit the amount is expressed in
        target: Unit the amount must be rescaled into
        operation: Name of the calling operation, used in the error message

    Raises:
        IncompatibleUnitsError: If the units are not convertible
    """
    if source.is_convertible(target):
        return
    error = IncompatibleUnitsError(source, target, operation)
    logger.log_contract_violation(error)
    raise error


def ensure_precision(precision: int) -> None:
    """Fail fast on a negative rounding precision."""
    if precision >= 0:
        return
    error = InvalidPrecisionError(precision)
    logger.log_contract_violation(error)
    raise error
