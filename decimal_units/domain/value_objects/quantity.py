"""
Quantity value object.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext

from decimal_units.domain.value_objects.unit import Unit
from decimal_units.error_handling.contracts import ensure_convertible, ensure_precision
from decimal_units.utils.logging import get_enhanced_logger, LogCategory
from decimal_units.utils.numeric import Numeric, SCALAR_TYPES, to_decimal, decimal_context, format_decimal

logger = get_enhanced_logger(__name__, LogCategory.CONVERSION)


@dataclass(frozen=True, eq=False)
class Quantity:
    """
    Exact decimal amount expressed in a unit.

    Addition and subtraction convert the right operand into the left
    operand's unit, so the result is always in ``lhs.unit``. Equality
    converts too and treats inconvertible units as unequal; ordering
    requires convertible units and raises ``IncompatibleUnitsError``
    otherwise.
    """

    amount: Decimal
    unit: Unit

    # Equality crosses units, so no hash can agree with it
    __hash__ = None

    # Make numpy scalars defer to __rmul__
    __array_ufunc__ = None

    def __post_init__(self):
        """Normalize amount to Decimal."""
        object.__setattr__(self, 'amount', to_decimal(self.amount))

    def __str__(self) -> str:
        """String representation."""
        return f"{format_decimal(self.amount)} {self.unit}"

    def convert_to(self, target: Unit) -> 'Quantity':
        """
        Express this quantity in another unit.

        Args:
            target: Unit to convert into

        Returns:
            New quantity in ``target``

        Raises:
            IncompatibleUnitsError: If the units are not convertible
        """
        ensure_convertible(self.unit, target, "convert")
        amount = self.unit.convert(self.amount, target)
        logger.log_conversion(self.amount, self.unit, target, amount)
        return Quantity(amount, target)

    def negative(self) -> 'Quantity':
        """Quantity scaled by -1."""
        return self * -1

    def rounded(self, precision: int) -> 'Quantity':
        """
        Round to ``precision`` fractional digits, ties away from zero.

        No decimal signal is raised: inexact, overflow, underflow and
        division-by-zero conditions all yield a best-effort amount.

        Raises:
            InvalidPrecisionError: If precision is negative
        """
        ensure_precision(precision)
        amount = self.amount
        if not amount.is_finite() or amount.as_tuple().exponent >= -precision:
            return Quantity(amount, self.unit)

        with localcontext() as ctx:
            ctx.clear_traps()
            ctx.prec = max(ctx.prec, amount.adjusted() + precision + 2)
            rounded = amount.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)
        logger.log_rounding(amount, precision, rounded)
        return Quantity(rounded, self.unit)

    def is_convertible(self, other: 'Quantity') -> bool:
        """Check whether ``other`` can be added to or compared with this quantity."""
        return self.unit.is_convertible(other.unit)

    def equals(self, other: 'Quantity') -> bool:
        """
        Exact equality after converting ``other`` into this unit.

        Quantities in inconvertible units are unequal; this never raises.
        """
        if not isinstance(other, Quantity):
            return False
        if not self.unit.is_convertible(other.unit):
            return False
        return self.amount == other.convert_to(self.unit).amount

    @property
    def is_positive(self) -> bool:
        """Check if amount is positive."""
        return self.amount > 0

    @property
    def is_negative(self) -> bool:
        """Check if amount is negative."""
        return self.amount < 0

    @property
    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == 0

    def __neg__(self) -> 'Quantity':
        return self.negative()

    def __pos__(self) -> 'Quantity':
        return Quantity(self.amount, self.unit)

    def __add__(self, other: 'Quantity') -> 'Quantity':
        """Add quantities; the result is in this quantity's unit."""
        if not isinstance(other, Quantity):
            return NotImplemented
        ensure_convertible(self.unit, other.unit, "add")
        converted = other.convert_to(self.unit).amount
        with decimal_context():
            amount = self.amount + converted
        return Quantity(amount, self.unit)

    def __sub__(self, other: 'Quantity') -> 'Quantity':
        """Subtract quantities; the result is in this quantity's unit."""
        if not isinstance(other, Quantity):
            return NotImplemented
        ensure_convertible(self.unit, other.unit, "subtract")
        converted = other.convert_to(self.unit).amount
        with decimal_context():
            amount = self.amount - converted
        return Quantity(amount, self.unit)

    def __mul__(self, other: Numeric) -> 'Quantity':
        """Multiply by a scalar."""
        if not isinstance(other, SCALAR_TYPES):
            return NotImplemented
        with decimal_context():
            amount = self.amount * to_decimal(other)
        return Quantity(amount, self.unit)

    def __rmul__(self, other: Numeric) -> 'Quantity':
        """Multiply by a scalar on the left; same result as ``self * other``."""
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        """Check equality."""
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.equals(other)

    def _amount_in(self, other: 'Quantity') -> Decimal:
        ensure_convertible(self.unit, other.unit, "compare")
        return self.convert_to(other.unit).amount

    def __lt__(self, other: 'Quantity') -> bool:
        """Less than comparison (convertible units only)."""
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._amount_in(other) < other.amount

    def __le__(self, other: 'Quantity') -> bool:
        """Less than or equal comparison (convertible units only)."""
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._amount_in(other) <= other.amount

    def __gt__(self, other: 'Quantity') -> bool:
        """Greater than comparison (convertible units only)."""
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._amount_in(other) > other.amount

    def __ge__(self, other: 'Quantity') -> bool:
        """Greater than or equal comparison (convertible units only)."""
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._amount_in(other) >= other.amount
