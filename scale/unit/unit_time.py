"""Time unit definitions for durations.

This module provides durations from the nanosecond up to the millennium,
all converting through the second. Calendar units use fixed lengths: a year
is 365 days, decades, centuries and millennia are multiples of that year,
and a month is the mean month of 2629822.96584 seconds. No calendar
arithmetic is performed.

Classes:
    TimeUnit: Time unit table, factors in seconds.
    Time: Time quantity.

Example:
    >>> flight = TimeUnit.hour(1.25)
    >>> print(flight.to(TimeUnit.minute))  # "75.0_minute"
    >>> print(flight + TimeUnit.second(30))  # "4530.0_second"
"""

from __future__ import annotations

from .unit_base import Quantity, UnitEnum


class TimeUnit(UnitEnum):
    """Time units, valued by how many seconds one unit equals.

    Attributes:
        second: Canonical unit (factor 1).
        month: Mean month, 2629822.96584 s.
        year: 365 days, 31536000 s.
    """

    nanosecond = 0.000_000_001
    microsecond = 0.000_001
    millisecond = 0.001
    centisecond = 0.01
    second = 1
    minute = 60
    hour = 3_600
    day = 86_400
    week = 604_800
    fortnight = 1_209_600
    month = 2_629_822.965_84
    year = 31_536_000
    decade = 315_360_000
    century = 3_153_600_000
    millennium = 31_536_000_000


class Time(Quantity):
    """Time quantity: a duration paired with a TimeUnit.

    A Time is a duration, not a point in time.
    """

    UNIT = TimeUnit
