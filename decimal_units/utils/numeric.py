"""
Exact decimal coercion and the arithmetic context.
"""

from contextlib import contextmanager
from decimal import Decimal, InvalidOperation, localcontext
from typing import Iterator, Union

import numpy as np

from decimal_units.configs import get_settings

Numeric = Union[Decimal, int, float, str, np.integer, np.floating]

# Types accepted as multiplication scalars
SCALAR_TYPES = (Decimal, int, float, np.integer, np.floating)


def to_decimal(value: Numeric) -> Decimal:
    """
    Convert a number to Decimal without binary floating-point error.

    Binary floats (Python and numpy, single or double precision) go through
    their shortest round-tripping decimal string, so ``0.1`` becomes
    ``Decimal("0.1")`` rather than the exact binary expansion.

    Args:
        value: Decimal, int, float, numeric string or numpy scalar

    Returns:
        Decimal value

    Raises:
        TypeError: If value is not a number
        ValueError: If value is a string that is not a valid number
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (bool, int, np.integer)):
        return Decimal(int(value))
    if isinstance(value, (float, np.floating)):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Invalid decimal literal: {value!r}") from None
    raise TypeError(f"Cannot convert {type(value).__name__} to Decimal")


@contextmanager
def decimal_context() -> Iterator:
    """Local decimal context with the configured precision."""
    with localcontext() as ctx:
        ctx.prec = get_settings().decimal_precision
        yield ctx


def format_decimal(value: Decimal) -> str:
    """
    Canonical text of a decimal: positional notation, no trailing zeros.

    >>> format_decimal(Decimal("1.50"))
    '1.5'
    >>> format_decimal(Decimal("1E+2"))
    '100'
    """
    if not value.is_finite():
        return str(value)
    if value.is_zero():
        return "0"
    # Wide enough that normalize() never rounds the stored digits
    with localcontext() as ctx:
        ctx.prec = len(value.as_tuple().digits)
        return format(value.normalize(), 'f')
