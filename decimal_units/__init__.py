"""
decimal-units: exact decimal quantities with unit-aware arithmetic.

A ``Quantity`` pairs a ``Decimal`` amount with a ``Unit``. Units are supplied
by the caller through the ``Unit`` interface; ``LinearUnit`` covers unit
systems related by constant ratios.
"""

import logging

from .domain import Unit, LinearUnit, Quantity
from .error_handling import (
    QuantityError, ContractViolation, IncompatibleUnitsError, InvalidPrecisionError
)

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Unit", "LinearUnit", "Quantity",
    "QuantityError", "ContractViolation", "IncompatibleUnitsError", "InvalidPrecisionError",
]
