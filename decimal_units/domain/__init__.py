"""
Domain model: quantities and the units they are expressed in.
"""

from .value_objects import Unit, LinearUnit, Quantity

__all__ = ["Unit", "LinearUnit", "Quantity"]
