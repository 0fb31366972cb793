"""Global configuration and type definitions for the quantity library.

Type Definitions:
    BASE_TYPE: Numeric types accepted by bulk unit conversion. Python native
               scalars (int, float) and NumPy arrays, so a whole column of
               magnitudes can be converted in one call.

Tolerances:
    REL_TOLERANCE: Default relative tolerance used by ``Quantity.isclose``.
    ABS_TOLERANCE: Default absolute tolerance used by ``Quantity.isclose``.

Example:
    >>> import numpy as np
    >>> from scale.config import BASE_TYPE
    >>> scalar: BASE_TYPE = 3.5
    >>> column: BASE_TYPE = np.array([1.0, 2.0, 3.0])
"""

from numpy import ndarray

BASE_TYPE = int | float | ndarray

REL_TOLERANCE = 1e-9
ABS_TOLERANCE = 0.0
