"""Weight (mass) unit definitions.

All weights convert through the gram. The ``newton`` unit is the mass whose
weight is one newton under standard gravity (about 101.97 g), which lets a
force reading from a scale be mixed with ordinary masses.

Classes:
    WeightUnit: Weight unit table, factors in grams.
    Weight: Weight quantity.

Example:
    >>> parcel = WeightUnit.kilogram(2) - WeightUnit.gram(500)
    >>> print(parcel)  # "1500.0_gram"
"""

from __future__ import annotations

from .unit_base import Quantity, UnitEnum


class WeightUnit(UnitEnum):
    """Weight units, valued by how many grams one unit equals.

    Attributes:
        gram: Canonical unit (factor 1).
        ton: Metric tonne, 1e6 g.
        pound: Avoirdupois pound, 453.59237 g.
        stone: 14 pounds, 6350.29318 g.
    """

    milligram = 0.001
    centigram = 0.01
    decigram = 0.1
    gram = 1
    dekagram = 10
    hectogram = 100
    kilogram = 1_000
    ton = 1_000_000
    carat = 0.2
    newton = 101.971_621_297_8
    ounce = 28.349_523_125
    pound = 453.592_37
    stone = 6_350.293_18


class Weight(Quantity):
    """Weight quantity: a magnitude paired with a WeightUnit."""

    UNIT = WeightUnit
