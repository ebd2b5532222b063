"""Intervals over fixed-width numeric kinds.

Each class pins its ordering, so endpoints and point arguments are checked
against the kind (range, type) and compared with that kind's total order.

Example:
    >>> IntInterval.of(1, 3, IntervalType.CLOSED_OPEN).contains(3)
    False
    >>> DoubleInterval.of(-0.0, 0.0, IntervalType.CLOSED_OPEN).contains(0.0)
    False
"""

from dataclasses import dataclass, field

from .interval import Interval
from .ordering import CHAR, FLOAT32, FLOAT64, INT16, INT32, INT64, Ordering


@dataclass(frozen=True, kw_only=True, eq=False)
class ShortInterval(Interval[int]):
    """Interval over signed 16-bit integers."""

    ordering: Ordering[int] = field(default=INT16, init=False, repr=False)


@dataclass(frozen=True, kw_only=True, eq=False)
class IntInterval(Interval[int]):
    """Interval over signed 32-bit integers."""

    ordering: Ordering[int] = field(default=INT32, init=False, repr=False)


@dataclass(frozen=True, kw_only=True, eq=False)
class LongInterval(Interval[int]):
    """Interval over signed 64-bit integers."""

    ordering: Ordering[int] = field(default=INT64, init=False, repr=False)


@dataclass(frozen=True, kw_only=True, eq=False)
class FloatInterval(Interval[float]):
    """Interval over single-precision floats.

    Endpoints and point arguments are rounded to the nearest binary32 value.
    """

    ordering: Ordering[float] = field(default=FLOAT32, init=False, repr=False)


@dataclass(frozen=True, kw_only=True, eq=False)
class DoubleInterval(Interval[float]):
    """Interval over double-precision floats in IEEE total order."""

    ordering: Ordering[float] = field(default=FLOAT64, init=False, repr=False)


@dataclass(frozen=True, kw_only=True, eq=False)
class CharInterval(Interval[str]):
    """Interval over single UTF-16 code units, ordered by code point."""

    ordering: Ordering[str] = field(default=CHAR, init=False, repr=False)
