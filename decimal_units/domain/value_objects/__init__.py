"""
Value objects - Immutable objects that represent concepts.
"""

from .unit import Unit, LinearUnit
from .quantity import Quantity

__all__ = ["Unit", "LinearUnit", "Quantity"]
