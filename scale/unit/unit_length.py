"""Length unit definitions for linear measurements.

All lengths convert through the meter, the canonical unit of the family.
Metric prefixes from millimeter to kilometer are provided alongside the
imperial and nautical units commonly met in practice, plus the parsec for
astronomical distances.

These units are commonly used for:
- Distances, ranges and altitudes
- Dimensions of parts and buildings
- Mixed metric/imperial inputs that must be combined

Classes:
    LengthUnit: Length unit table, factors in meters.
    Length: Length quantity.

Example:
    >>> trip = Length(500, LengthUnit.meter) + LengthUnit.kilometer(1)
    >>> print(trip)  # "1500.0_meter" (meter factor 1 < kilometer factor 1000)
    >>> print(LengthUnit.mile(1).to(LengthUnit.kilometer))  # about "1.609344_kilometer"
"""

from __future__ import annotations

from .unit_base import Quantity, UnitEnum


class LengthUnit(UnitEnum):
    """Length units, valued by how many meters one unit equals.

    Attributes:
        meter: Canonical unit (factor 1).
        inch: 0.0254 m, the international inch.
        parsec: Approximately 3.0857e16 m.
    """

    millimeter = 0.001
    centimeter = 0.01
    decimeter = 0.1
    meter = 1
    dekameter = 10
    hectometer = 100
    kilometer = 1_000
    yard = 0.914_4
    parsec = 30_856_775_813_060_000
    mile = 1_609.344
    foot = 0.304_8
    fathom = 1.828_8
    inch = 0.025_4
    league = 4_828.032


class Length(Quantity):
    """Length quantity: a magnitude paired with a LengthUnit.

    Sums and differences are expressed in the finer of the two operand
    units, so millimeters mixed with kilometers stay in millimeters.
    Multiplying two lengths is not supported; use a scalar.

    Example:
        >>> Length(1, LengthUnit.kilometer).to(LengthUnit.meter)
        Length(value=1000.0, unit=LengthUnit.meter)
        >>> Length(10, LengthUnit.meter) * 5
        Length(value=50.0, unit=LengthUnit.meter)
    """

    UNIT = LengthUnit
