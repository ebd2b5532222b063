from .empty import EMPTY, EmptyInterval
from .errors import (
    EmptyIntervalError,
    IncompatibleIntervalError,
    IntervalError,
    InvalidEndpointsError,
    MissingArgumentError,
    ValueKindError,
)
from .formatter import format_interval
from .interval import Interval
from .interval_type import IntervalType
from .ordering import (
    CHAR,
    FLOAT32,
    FLOAT64,
    INT16,
    INT32,
    INT64,
    NATURAL,
    ComparatorOrdering,
    Ordering,
)
from .primitive import (
    CharInterval,
    DoubleInterval,
    FloatInterval,
    IntInterval,
    LongInterval,
    ShortInterval,
)

__all__ = [
    "Interval",
    "IntervalType",
    "ShortInterval",
    "IntInterval",
    "LongInterval",
    "FloatInterval",
    "DoubleInterval",
    "CharInterval",
    "EmptyInterval",
    "EMPTY",
    "Ordering",
    "ComparatorOrdering",
    "NATURAL",
    "INT16",
    "INT32",
    "INT64",
    "FLOAT32",
    "FLOAT64",
    "CHAR",
    "format_interval",
    "IntervalError",
    "InvalidEndpointsError",
    "MissingArgumentError",
    "ValueKindError",
    "IncompatibleIntervalError",
    "EmptyIntervalError",
]
