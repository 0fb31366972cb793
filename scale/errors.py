"""Exception hierarchy for quantity arithmetic and unit tables.

All errors raised by the package derive from QuantityError, and each one
also derives from the built-in exception a caller would naturally expect, so
``except ZeroDivisionError`` or ``except TypeError`` keeps working.

Classes:
    QuantityError: Root of the hierarchy.
    DividedByZeroError: Scalar division of a quantity by zero.
    IncompatibleUnitsError: Operands or units from different families.
    UnitTableError: Malformed unit table detected when a family is defined.
"""


class QuantityError(Exception):
    """Base class for all errors raised by the scale package."""


class DividedByZeroError(QuantityError, ZeroDivisionError):
    """Raised when a quantity is divided by a scalar equal to zero."""


class IncompatibleUnitsError(QuantityError, TypeError):
    """Raised when units or quantities of different families are mixed.

    Also raised when a quantity is built from a unit that does not belong to
    its family, or from a value that is not a real number.
    """


class UnitTableError(QuantityError, ValueError):
    """Raised when a unit enumeration violates the factor table invariants."""
