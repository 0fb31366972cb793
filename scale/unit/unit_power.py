"""Power unit definitions.

The watt is the canonical unit; horsepower is the mechanical (imperial)
horsepower of about 745.7 W.

Classes:
    PowerUnit: Power unit table, factors in watts.
    Power: Power quantity.
"""

from __future__ import annotations

from .unit_base import Quantity, UnitEnum


class PowerUnit(UnitEnum):
    """Power units, valued by how many watts one unit equals.

    Attributes:
        watt: Canonical unit (factor 1).
        horsepower: Mechanical horsepower, 745.6998715823 W.
    """

    milliwatt = 0.001
    watt = 1
    kilowatt = 1_000
    megawatt = 1_000_000
    gigawatt = 1_000_000_000
    horsepower = 745.699_871_582_3


class Power(Quantity):
    """Power quantity: a magnitude paired with a PowerUnit.

    Example:
        >>> engine = PowerUnit.horsepower(150)
        >>> print(engine.to(PowerUnit.kilowatt))  # about "111.85_kilowatt"
    """

    UNIT = PowerUnit
