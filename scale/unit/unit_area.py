"""Area unit definitions, canonical unit square meter."""

from __future__ import annotations

from .unit_base import Quantity, UnitEnum


class AreaUnit(UnitEnum):
    """Area units, valued by how many square meters one unit equals."""

    squareFoot = 0.092_903
    squareYard = 0.836_127
    squareMeter = 1
    squareKilometer = 1_000_000
    squareMile = 2_589_988.11
    acre = 4_046.86
    hectare = 10_000


class Area(Quantity):
    """Area quantity.

    Areas are defined on their own and are never derived from two lengths.

    Example:
        >>> AreaUnit.hectare(1).to(AreaUnit.acre).value  # about 2.471
    """

    UNIT = AreaUnit
