"""Angular unit definitions.

The canonical unit of the angle family is the degree. The ``pi`` unit is a
half turn, so ``AngleUnit.pi(2)`` is a full rotation.

Classes:
    AngleUnit: Angle unit table, factors in degrees.
    Angle: Angle quantity.

Example:
    >>> heading = AngleUnit.degree(90)
    >>> print(heading.to(AngleUnit.pi))  # "0.5_pi"
"""

from __future__ import annotations

from .unit_base import Quantity, UnitEnum


class AngleUnit(UnitEnum):
    """Angle units, valued by how many degrees one unit equals."""

    degree = 1
    radian = 57.295_8
    pi = 180


class Angle(Quantity):
    """Angle quantity: a magnitude paired with an AngleUnit."""

    UNIT = AngleUnit
