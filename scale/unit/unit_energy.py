"""Energy unit definitions.

All energy values convert through the joule. Dietary calories are the
kilocalorie; the gram calorie is the small calorie of 4.184 J.

Classes:
    EnergyUnit: Energy unit table, factors in joules.
    Energy: Energy quantity.

Example:
    >>> meal = EnergyUnit.kilocalorie(650)
    >>> print(meal.to(EnergyUnit.watthour))  # about "755.4_watthour"
"""

from __future__ import annotations

from .unit_base import Quantity, UnitEnum


class EnergyUnit(UnitEnum):
    """Energy units, valued by how many joules one unit equals."""

    joule = 1
    kilojoule = 1_000
    gramcalorie = 4.184
    kilocalorie = 4_184
    watthour = 3_600


class Energy(Quantity):
    """Energy quantity: a magnitude paired with an EnergyUnit."""

    UNIT = EnergyUnit
