"""Physical quantity families built on one generic quantity type.

Architecture:
    - unit_base: UnitEnum and Quantity, the generic family machinery
    - unit_angle: Angle (degree, radian, pi)
    - unit_area: Area (square foot to square mile, acre, hectare)
    - unit_energy: Energy (joule, calories, watt-hour)
    - unit_length: Length (metric, imperial, parsec, league)
    - unit_power: Power (milliwatt to gigawatt, horsepower)
    - unit_time: Time (nanosecond to millennium)
    - unit_volume: Volume (microliter to kiloliter, gill, pint, quart, gallon)
    - unit_weight: Weight (milligram to ton, carat, ounce, pound, stone)

Each family pairs a unit table with a quantity class. Quantities of the same
family convert and combine freely; quantities of different families never
combine.

Example:
    >>> from scale.unit import Length, LengthUnit, Weight, WeightUnit
    >>>
    >>> total = Length(500, LengthUnit.meter) + LengthUnit.kilometer(1)
    >>> print(total)  # "1500.0_meter"
    >>> print(total.to(LengthUnit.kilometer))  # "1.5_kilometer"
    >>>
    >>> # Cross-family operations are prevented
    >>> # total + WeightUnit.gram(1)  # IncompatibleUnitsError
"""

from .unit_angle import Angle, AngleUnit
from .unit_area import Area, AreaUnit
from .unit_base import Quantity, UnitEnum, families, quantity_type
from .unit_energy import Energy, EnergyUnit
from .unit_length import Length, LengthUnit
from .unit_power import Power, PowerUnit
from .unit_time import Time, TimeUnit
from .unit_volume import Volume, VolumeUnit
from .unit_weight import Weight, WeightUnit

__all__ = [
    # Base classes
    "Quantity",
    "UnitEnum",
    "families",
    "quantity_type",
    # Families
    "Angle",
    "AngleUnit",
    "Area",
    "AreaUnit",
    "Energy",
    "EnergyUnit",
    "Length",
    "LengthUnit",
    "Power",
    "PowerUnit",
    "Time",
    "TimeUnit",
    "Volume",
    "VolumeUnit",
    "Weight",
    "WeightUnit",
]
