import math
import struct
from abc import ABC, abstractmethod
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from typing_extensions import override

from .errors import MissingArgumentError, ValueKindError
from .util import (
    CHAR_MAX,
    CHAR_MIN,
    FLOAT32_MAX,
    INT16_MAX,
    INT16_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
)

T = TypeVar("T")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Ordering(ABC, Generic[T]):
    """Three-way comparison over one kind of value.

    An ordering is the only thing an interval knows about its element type:
    every boundary decision goes through ``compare``.
    """

    name: str

    @abstractmethod
    def compare(self, left: T, right: T) -> int:
        """Return a negative, zero or positive int as left <, ==, > right."""
        pass

    def hash_key(self, value: T) -> Hashable:
        """Hashable stand-in such that ``compare(a, b) == 0`` implies equal keys."""
        return value

    def coerce(self, value: Any, argument: str = "value") -> T:
        """Validate that ``value`` belongs to this kind and normalize it.

        Raises:
            MissingArgumentError: If value is None
            ValueKindError: If value is not a member of the kind
        """
        if value is None:
            raise MissingArgumentError(argument)
        return self._coerce(value)

    def _coerce(self, value: Any) -> T:
        return value


@dataclass(frozen=True, kw_only=True)
class NaturalOrdering(Ordering[Any]):
    name: str = "natural order"

    @override
    def compare(self, left: Any, right: Any) -> int:
        return (left > right) - (left < right)

    @override
    def _coerce(self, value: Any) -> Any:
        # NaN is unordered under < and >; use DoubleInterval for IEEE total order.
        if isinstance(value, float) and math.isnan(value):
            raise ValueKindError(
                value, self.name, "NaN has no natural order, use DoubleInterval"
            )
        return value


@dataclass(frozen=True, kw_only=True)
class ComparatorOrdering(Ordering[T]):
    """Ordering backed by a user-supplied three-way comparator."""

    function: Callable[[T, T], int]
    name: str = "comparator"

    @override
    def compare(self, left: T, right: T) -> int:
        return _sign(self.function(left, right))

    @override
    def hash_key(self, value: T) -> Hashable:
        # Arbitrary comparators give no equality-preserving key.
        return None


@dataclass(frozen=True, kw_only=True)
class IntegerOrdering(Ordering[int]):
    name: str
    minimum: int
    maximum: int

    @override
    def compare(self, left: int, right: int) -> int:
        return (left > right) - (left < right)

    @override
    def _coerce(self, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueKindError(
                value, self.name, f"expected int, got {type(value).__name__}"
            )
        if not self.minimum <= value <= self.maximum:
            raise ValueKindError(
                value, self.name, f"outside [{self.minimum}, {self.maximum}]"
            )
        return value


def total_order_key(value: float) -> tuple[int, float, int]:
    """Sort key for IEEE total order.

    ``-0.0`` sorts before ``0.0``; all NaNs are equal to each other and
    greater than ``+inf``.
    """
    if math.isnan(value):
        return (1, 0.0, 0)
    return (0, value, 1 if math.copysign(1.0, value) > 0 else -1)


@dataclass(frozen=True, kw_only=True)
class FloatOrdering(Ordering[float]):
    name: str
    single: bool = False

    @override
    def compare(self, left: float, right: float) -> int:
        left_key = total_order_key(left)
        right_key = total_order_key(right)
        return (left_key > right_key) - (left_key < right_key)

    @override
    def hash_key(self, value: float) -> Hashable:
        return total_order_key(value)

    @override
    def _coerce(self, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueKindError(
                value, self.name, f"expected int or float, got {type(value).__name__}"
            )
        try:
            result = float(value)
        except OverflowError as exc:
            raise ValueKindError(value, self.name, "magnitude too large") from exc
        if self.single:
            if math.isfinite(result) and abs(result) > FLOAT32_MAX:
                raise ValueKindError(
                    value, self.name, f"magnitude above {FLOAT32_MAX}"
                )
            # Round to the nearest binary32 value.
            (result,) = struct.unpack("f", struct.pack("f", result))
        return result


@dataclass(frozen=True, kw_only=True)
class CharOrdering(Ordering[str]):
    name: str = "char"

    @override
    def compare(self, left: str, right: str) -> int:
        return _sign(ord(left) - ord(right))

    @override
    def _coerce(self, value: Any) -> str:
        if not isinstance(value, str) or len(value) != 1:
            raise ValueKindError(value, self.name, "expected a one-character str")
        if not CHAR_MIN <= ord(value) <= CHAR_MAX:
            raise ValueKindError(
                value, self.name, f"code point above {CHAR_MAX:#06x}"
            )
        return value


NATURAL: NaturalOrdering = NaturalOrdering()
INT16: IntegerOrdering = IntegerOrdering(name="short", minimum=INT16_MIN, maximum=INT16_MAX)
INT32: IntegerOrdering = IntegerOrdering(name="int", minimum=INT32_MIN, maximum=INT32_MAX)
INT64: IntegerOrdering = IntegerOrdering(name="long", minimum=INT64_MIN, maximum=INT64_MAX)
FLOAT32: FloatOrdering = FloatOrdering(name="float", single=True)
FLOAT64: FloatOrdering = FloatOrdering(name="double")
CHAR: CharOrdering = CharOrdering()
