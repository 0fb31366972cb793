"""Base quantity system shared by every unit family.

This module provides the two building blocks every physical quantity family
is made of: a unit enumeration whose member values are conversion factors,
and an immutable quantity value pairing a magnitude with one of those units.
A family is defined purely as data, by subclassing both:

    >>> class LengthUnit(UnitEnum):
    ...     millimeter = 0.001
    ...     meter = 1
    ...     kilometer = 1_000
    >>> class Length(Quantity):
    ...     UNIT = LengthUnit

Key Concepts:
- Factor: how many canonical units one unit of a member equals.
- Canonical unit: the single member with factor 1; every conversion routes
  through it.
- ROOT class: the quantity class that declared the family's UNIT table.
  Subclasses of a family share its ROOT and may be mixed freely, while
  quantities with different ROOT classes may never be combined.
- Reference unit: addition and subtraction express their result in the
  operand unit with the smaller factor, so mixing millimeters and
  kilometers stays in millimeters.

Multiplication and division only accept plain real scalars. Multiplying two
lengths does not give an area: 10 meters * 10 meters is not 100 meters, and
deriving the area is out of scope for this package.

Classes:
    UnitEnum: Base enumeration for a family's unit table.
    Quantity: Base immutable value type for a family.

Functions:
    families: All registered quantity classes.
    quantity_type: Quantity class registered for a unit enumeration.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from enum import Enum
from math import isclose, isfinite
from numbers import Real
from typing import Callable, ClassVar

from scale.config import ABS_TOLERANCE, BASE_TYPE, REL_TOLERANCE
from scale.errors import DividedByZeroError, IncompatibleUnitsError, UnitTableError

logger = logging.getLogger(__name__)

_FAMILIES: dict[type[UnitEnum], type[Quantity]] = {}


class UnitEnum(Enum):
    """Base class for a family's closed table of units.

    Each member's value is its conversion factor relative to the family's
    canonical unit. Members are callable and build a quantity of the
    family the table is registered for:

        >>> LengthUnit.kilometer(10.0)
        Length(value=10.0, unit=LengthUnit.kilometer)
    """

    @property
    def factor(self) -> float:
        """Number of canonical units one unit of this member equals."""
        return float(self.value)

    @classmethod
    def base(cls) -> UnitEnum:
        """Return the canonical unit of the table (the member with factor 1).

        Raises:
            UnitTableError: If the table has no canonical unit.
        """
        for unit in cls:
            if unit.value == 1:
                return unit
        raise UnitTableError(f"{cls.__name__} has no unit with factor 1")

    def convert(self, value: BASE_TYPE, target: UnitEnum) -> BASE_TYPE:
        """Convert a raw magnitude expressed in this unit into ``target``.

        Works on scalars and elementwise on NumPy arrays. Converting into the
        same unit returns ``value`` untouched.

        Args:
            value: Magnitude in this unit.
            target: Unit of the same table to convert into.

        Returns:
            The magnitude expressed in ``target``.

        Raises:
            IncompatibleUnitsError: If ``target`` belongs to another table.
        """
        if type(target) is not type(self):
            raise IncompatibleUnitsError(
                f"Cannot convert {type(self).__name__}.{self.name} "
                f"to {target!r}"
            )
        if target is self:
            return value
        return value * self.factor / target.factor

    def __call__(self, value: Real) -> Quantity:
        return quantity_type(type(self))(value, self)

    def __str__(self) -> str:
        return self.name


def _validate_unit_table(unit_type: type[UnitEnum]) -> None:
    """Check the factor table invariants of a unit enumeration.

    Factors must be positive, finite and pairwise distinct, and exactly one
    of them must equal 1.

    Raises:
        UnitTableError: If any invariant is violated.
    """
    if not (isinstance(unit_type, type) and issubclass(unit_type, UnitEnum)):
        raise UnitTableError(f"UNIT must be a UnitEnum subclass, got {unit_type!r}")

    units = list(unit_type)
    if not units:
        raise UnitTableError(f"{unit_type.__name__} defines no units")

    # Enum turns members with an equal value into aliases of the first one.
    aliases = [name for name, unit in unit_type.__members__.items() if unit.name != name]
    if aliases:
        raise UnitTableError(
            f"{unit_type.__name__} units share a factor with another unit: {aliases}"
        )

    for unit in units:
        factor = unit.value
        if isinstance(factor, bool) or not isinstance(factor, Real):
            raise UnitTableError(f"{unit_type.__name__}.{unit.name} factor is not a real number")
        if not isfinite(factor) or factor <= 0:
            raise UnitTableError(
                f"{unit_type.__name__}.{unit.name} factor must be positive and finite, "
                f"got {factor!r}"
            )

    canonical = [unit.name for unit in units if unit.value == 1]
    if len(canonical) != 1:
        raise UnitTableError(
            f"{unit_type.__name__} must have exactly one unit with factor 1, got {canonical}"
        )


def families() -> tuple[type[Quantity], ...]:
    """Return every registered quantity class, in definition order."""
    return tuple(_FAMILIES.values())


def quantity_type(unit_type: type[UnitEnum]) -> type[Quantity]:
    """Return the quantity class registered for a unit enumeration.

    Args:
        unit_type: A family's unit enumeration, e.g. ``LengthUnit``.

    Raises:
        UnitTableError: If no quantity class declares ``unit_type`` as UNIT.
    """
    try:
        return _FAMILIES[unit_type]
    except KeyError:
        raise UnitTableError(
            f"{unit_type.__name__} is not the UNIT table of any quantity"
        ) from None


@dataclass(frozen=True, eq=False, repr=False)
class Quantity:
    """Immutable magnitude paired with a unit of a single family.

    Concrete families subclass this and declare their unit table as UNIT.
    Defining the subclass validates the table, sets ROOT and registers the
    family. Operations never mutate a quantity; they return new ones.

    Attributes:
        value (float): Magnitude expressed in ``unit``.
        unit (UnitEnum): Member of the family's UNIT table.
        UNIT (ClassVar[type[UnitEnum]]): The family's unit table.
        ROOT (ClassVar[type[Quantity]]): Class that declared the family.
    """

    value: float
    unit: UnitEnum

    UNIT: ClassVar[type[UnitEnum]]
    ROOT: ClassVar[type[Quantity]]

    # Let NumPy scalars defer to __rmul__ instead of broadcasting.
    __array_ufunc__ = None

    def __init_subclass__(cls, **kwargs):
        """Validate and register the family declared by a subclass.

        A subclass that declares UNIT becomes the ROOT of a new family. A
        subclass without its own UNIT joins its parent's family.

        Raises:
            UnitTableError: If the table is malformed, already registered, or
                missing altogether.
        """
        super().__init_subclass__(**kwargs)
        if "UNIT" not in cls.__dict__:
            if not hasattr(cls, "UNIT"):
                raise UnitTableError(f"{cls.__name__} must declare a UNIT table")
            return

        _validate_unit_table(cls.UNIT)
        if cls.UNIT in _FAMILIES:
            raise UnitTableError(
                f"{cls.UNIT.__name__} is already the UNIT table of "
                f"{_FAMILIES[cls.UNIT].__name__}"
            )
        cls.ROOT = cls
        _FAMILIES[cls.UNIT] = cls
        logger.debug(
            "Registered quantity family %s with %d units (canonical unit %s)",
            cls.__name__,
            len(cls.UNIT),
            cls.UNIT.base().name,
        )

    def __post_init__(self):
        unit_type = getattr(type(self), "UNIT", None)
        if unit_type is None:
            raise TypeError("Quantity cannot be instantiated without a UNIT table")
        if not isinstance(self.unit, unit_type):
            raise IncompatibleUnitsError(
                f"{type(self).__name__} expects a {unit_type.__name__}, got {self.unit!r}"
            )
        if not isinstance(self.value, Real):
            raise IncompatibleUnitsError(
                f"{type(self).__name__} value must be a real number, got {self.value!r}"
            )
        object.__setattr__(self, "value", float(self.value))

    @property
    def magnitude(self) -> float:
        """Alias of ``value``."""
        return self.value

    @classmethod
    def from_base(cls, value: Real) -> Quantity:
        """Create a quantity from a magnitude in the canonical unit.

        Args:
            value: Magnitude already expressed in the canonical unit.

        Returns:
            Quantity: New instance in the canonical unit.
        """
        return cls(value, cls.UNIT.base())

    # -------------------------------- Conversion --------------------------------
    def to(self, unit: UnitEnum) -> Quantity:
        """Convert to another unit of the same family.

        The magnitude is ``value * source factor / target factor``. Converting
        to the quantity's own unit returns an equal magnitude exactly.

        Args:
            unit: Target unit, a member of the family's UNIT table.

        Returns:
            Quantity: New instance expressed in ``unit``.

        Raises:
            IncompatibleUnitsError: If ``unit`` belongs to another family.
        """
        return type(self)(self.unit.convert(self.value, unit), unit)

    def to_base(self) -> Quantity:
        """Convert to the family's canonical unit."""
        return self.to(self.UNIT.base())

    def __float__(self) -> float:
        """Return the magnitude expressed in the canonical unit."""
        return self.unit.convert(self.value, self.UNIT.base())

    # -------------------------------- Arithmetic Operations --------------------------------
    def _check_same_family(self, other: Quantity):
        """Check that ``other`` belongs to the same family.

        Raises:
            IncompatibleUnitsError: If the ROOT classes differ.
        """
        if self.ROOT is not other.ROOT:
            raise IncompatibleUnitsError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def _reference_unit(self, other: Quantity) -> UnitEnum:
        # Equal factors only happen for the same unit, left operand wins.
        if self.unit.factor <= other.unit.factor:
            return self.unit
        return other.unit

    def _combine(self, other: Quantity, operation: Callable[[float, float], float]) -> Quantity:
        """Apply ``operation`` to both magnitudes expressed in the reference unit.

        Args:
            other: Quantity of the same family.
            operation: Binary operation on the two magnitudes, left first.

        Returns:
            Quantity: Result expressed in the operand unit with the smaller factor.
        """
        self._check_same_family(other)
        unit = self._reference_unit(other)
        left = self.unit.convert(self.value, unit)
        right = other.unit.convert(other.value, unit)
        return type(self)(operation(left, right), unit)

    def __add__(self, other: Quantity) -> Quantity:
        """Add two quantities of the same family.

        Args:
            other: Quantity to add.

        Returns:
            Quantity: Sum in the operand unit with the smaller factor.

        Raises:
            IncompatibleUnitsError: If the quantities belong to different families.
        """
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._combine(other, operator.add)

    def __sub__(self, other: Quantity) -> Quantity:
        """Subtract a quantity of the same family.

        Args:
            other: Quantity to subtract from this one.

        Returns:
            Quantity: Difference in the operand unit with the smaller factor.

        Raises:
            IncompatibleUnitsError: If the quantities belong to different families.
        """
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._combine(other, operator.sub)

    def __mul__(self, k: Real) -> Quantity:
        """Scale the magnitude by a real scalar, keeping the unit.

        Quantity by quantity multiplication is not supported.

        Args:
            k: Dimensionless scalar.

        Returns:
            Quantity: Scaled quantity in the same unit.
        """
        if not isinstance(k, Real):
            return NotImplemented
        return type(self)(self.value * k, self.unit)

    def __rmul__(self, k: Real) -> Quantity:
        return self.__mul__(k)

    def __truediv__(self, k: Real) -> Quantity:
        """Divide the magnitude by a real scalar, keeping the unit.

        Args:
            k: Dimensionless, nonzero scalar.

        Returns:
            Quantity: Scaled quantity in the same unit.

        Raises:
            DividedByZeroError: If ``k`` equals zero.
        """
        if not isinstance(k, Real):
            return NotImplemented
        if k == 0:
            raise DividedByZeroError(f"Cannot divide {self} by zero")
        return type(self)(self.value / k, self.unit)

    # -------------------------------- Comparison --------------------------------
    def isclose(
        self,
        other: Quantity,
        rel_tol: float = REL_TOLERANCE,
        abs_tol: float = ABS_TOLERANCE,
    ) -> bool:
        """Compare canonical magnitudes within a tolerance.

        Args:
            other: Quantity of the same family.
            rel_tol: Relative tolerance, see ``math.isclose``.
            abs_tol: Absolute tolerance in canonical units.

        Raises:
            IncompatibleUnitsError: If the quantities belong to different families.
        """
        self._check_same_family(other)
        return isclose(float(self), float(other), rel_tol=rel_tol, abs_tol=abs_tol)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if self.ROOT is not other.ROOT:
            return False
        return float(self) == float(other)

    def __hash__(self) -> int:
        return hash((self.ROOT, float(self)))

    def __lt__(self, other: Quantity) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_same_family(other)
        return float(self) < float(other)

    def __le__(self, other: Quantity) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_same_family(other)
        return float(self) <= float(other)

    def __gt__(self, other: Quantity) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_same_family(other)
        return float(self) > float(other)

    def __ge__(self, other: Quantity) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_same_family(other)
        return float(self) >= float(other)

    # -------------------------------- Rendering --------------------------------
    def __str__(self) -> str:
        """Return the debug form ``<value>_<unit name>``, e.g. ``10.0_kilometer``."""
        return f"{self.value}_{self.unit.name}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(value={self.value!r}, "
            f"unit={type(self.unit).__name__}.{self.unit.name})"
        )
