"""
Unit value objects.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal

from decimal_units.error_handling.contracts import ensure_convertible
from decimal_units.utils.numeric import to_decimal, decimal_context


class Unit(ABC):
    """
    Abstract measurement unit.

    Quantity only relies on these two operations plus ``str()``, so any unit
    system can be plugged in by subclassing.
    """

    @abstractmethod
    def is_convertible(self, other: 'Unit') -> bool:
        """
        Check whether amounts in this unit can be rescaled into ``other``.

        Must be reflexive and symmetric.
        """
        pass

    @abstractmethod
    def convert(self, amount: Decimal, to: 'Unit') -> Decimal:
        """
        Rescale an amount expressed in this unit into ``to``.

        Only defined when ``self.is_convertible(to)``.

        Args:
            amount: Amount in this unit
            to: Target unit

        Returns:
            Amount in the target unit
        """
        pass


@dataclass(frozen=True)
class LinearUnit(Unit):
    """Unit related to its dimension's base unit by a constant ratio."""

    name: str
    ratio: Decimal
    dimension: str
    symbol: str = field(default="")

    def __post_init__(self):
        """Validate and normalize unit."""
        if not self.name or not self.name.strip():
            raise ValueError("Unit name cannot be empty")
        if not self.dimension:
            raise ValueError("Unit dimension cannot be empty")

        object.__setattr__(self, 'ratio', to_decimal(self.ratio))
        if not self.ratio.is_finite() or self.ratio <= 0:
            raise ValueError("Unit ratio must be positive and finite")

        if not self.symbol:
            object.__setattr__(self, 'symbol', self.name)

    def __str__(self) -> str:
        """String representation."""
        return self.name

    def is_convertible(self, other: Unit) -> bool:
        """Units of the same dimension are convertible."""
        return isinstance(other, LinearUnit) and self.dimension == other.dimension

    def convert(self, amount: Decimal, to: Unit) -> Decimal:
        """Rescale through the base unit: ``amount * self.ratio / to.ratio``."""
        ensure_convertible(self, to, "convert")
        if to == self:
            return amount
        with decimal_context():
            return amount * self.ratio / to.ratio
