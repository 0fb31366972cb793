"""Units-of-measure quantities with unit-aware arithmetic.

The scale package provides eight physical quantity families, each an
immutable magnitude paired with a unit from a fixed table:

    Angle, Area, Energy, Length, Power, Time, Volume, Weight

Quantities convert between units of their family, add and subtract with
other quantities of the same family (the result takes the finer operand
unit), and scale by plain numbers. Mixing families is an error, and no
dimensional analysis is performed: two lengths multiply to nothing.

Example:
    >>> from scale import Length, LengthUnit, Weight, WeightUnit
    >>>
    >>> Length(1, LengthUnit.kilometer).to(LengthUnit.meter)
    Length(value=1000.0, unit=LengthUnit.meter)
    >>> print(WeightUnit.kilogram(2) - WeightUnit.gram(500))
    1500.0_gram
    >>> Length(3, LengthUnit.meter) / 0
    Traceback (most recent call last):
        ...
    scale.errors.DividedByZeroError: Cannot divide 3.0_meter by zero
"""

import logging

from .errors import (
    DividedByZeroError,
    IncompatibleUnitsError,
    QuantityError,
    UnitTableError,
)
from .unit import (
    Angle,
    AngleUnit,
    Area,
    AreaUnit,
    Energy,
    EnergyUnit,
    Length,
    LengthUnit,
    Power,
    PowerUnit,
    Quantity,
    Time,
    TimeUnit,
    UnitEnum,
    Volume,
    VolumeUnit,
    Weight,
    WeightUnit,
    families,
    quantity_type,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "QuantityError",
    "DividedByZeroError",
    "IncompatibleUnitsError",
    "UnitTableError",
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
