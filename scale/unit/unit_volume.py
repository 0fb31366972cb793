"""Volume unit definitions, canonical unit liter.

The gallon is the US liquid gallon, while the quart is the imperial quart
(1.1365225 L); both values are kept as they appear in the unit table.
"""

from __future__ import annotations

from .unit_base import Quantity, UnitEnum


class VolumeUnit(UnitEnum):
    """Volume units, valued by how many liters one unit equals."""

    microliter = 0.000_001
    milliliter = 0.001
    centiliter = 0.01
    liter = 1
    dekaliter = 10
    hectoliter = 100
    kiloliter = 1_000
    gill = 0.118_294_118_25
    gallon = 3.785_41
    pint = 0.473_176_473
    quart = 1.136_522_5


class Volume(Quantity):
    UNIT = VolumeUnit
