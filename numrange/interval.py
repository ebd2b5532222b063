import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, TypeVar

from typing_extensions import Self, override

from .empty import EMPTY, EmptyInterval
from .errors import (
    IncompatibleIntervalError,
    InvalidEndpointsError,
    MissingArgumentError,
)
from .formatter import format_interval
from .interval_type import IntervalType
from .ordering import NATURAL, ComparatorOrdering, Ordering

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True, eq=False)
class Interval(Generic[T]):
    """An interval over any kind of value with a three-way comparison.

    Every boundary decision is made through ``ordering.compare``; the class
    never uses ``<``/``>`` on endpoints directly. Instances are validated on
    construction (``minimum <= maximum`` under the ordering) and immutable
    afterwards.

    Example:
        >>> a = Interval.of(1, 5, IntervalType.CLOSED)
        >>> b = Interval.of(3, 8, IntervalType.OPEN_CLOSED)
        >>> str(a.intersection(b))
        '(3, 5]'
    """

    minimum: T
    maximum: T
    interval_type: IntervalType
    ordering: Ordering[T] = field(default=NATURAL, repr=False)

    def __post_init__(self) -> None:
        if self.interval_type is None:
            raise MissingArgumentError("interval_type")
        if self.ordering is None:
            raise MissingArgumentError("ordering")

        minimum = self.ordering.coerce(self.minimum, "minimum")
        maximum = self.ordering.coerce(self.maximum, "maximum")
        if self.ordering.compare(minimum, maximum) > 0:
            logger.debug(
                "Rejected %s endpoints: %r > %r", self.ordering.name, minimum, maximum
            )
            raise InvalidEndpointsError(minimum, maximum)

        # Store the normalized values (e.g. single-precision rounding).
        object.__setattr__(self, "minimum", minimum)
        object.__setattr__(self, "maximum", maximum)

    @classmethod
    def of(cls, minimum: T, maximum: T, interval_type: IntervalType) -> Self:
        """Create an interval with this class's default ordering.

        Raises:
            InvalidEndpointsError: If minimum compares greater than maximum
            MissingArgumentError: If interval_type or an endpoint is None
        """
        return cls(minimum=minimum, maximum=maximum, interval_type=interval_type)

    @staticmethod
    def with_ordering(
        minimum: T, maximum: T, interval_type: IntervalType, ordering: Ordering[T]
    ) -> "Interval[T]":
        """Create a generic interval compared by the given ``ordering``."""
        return Interval(
            minimum=minimum,
            maximum=maximum,
            interval_type=interval_type,
            ordering=ordering,
        )

    @staticmethod
    def with_comparator(
        minimum: T,
        maximum: T,
        interval_type: IntervalType,
        compare: Callable[[T, T], int],
    ) -> "Interval[T]":
        """Create an interval ordered by a three-way ``compare(a, b)`` function."""
        if compare is None:
            raise MissingArgumentError("compare")
        return Interval.with_ordering(
            minimum, maximum, interval_type, ComparatorOrdering(function=compare)
        )

    @staticmethod
    def empty() -> EmptyInterval:
        return EMPTY

    @property
    def start_inclusive(self) -> bool:
        return self.interval_type.start_inclusive

    @property
    def end_inclusive(self) -> bool:
        return self.interval_type.end_inclusive

    @property
    def start_exclusive(self) -> bool:
        return self.interval_type.start_exclusive

    @property
    def end_exclusive(self) -> bool:
        return self.interval_type.end_exclusive

    def _point(self, value: Any) -> T:
        return self.ordering.coerce(value, "value")

    def _require_compatible(self, other: "Interval[Any]") -> None:
        if other.ordering != self.ordering:
            raise IncompatibleIntervalError(self.ordering.name, other.ordering.name)

    def is_degenerate(self) -> bool:
        """True if both endpoints compare equal."""
        return self.ordering.compare(self.minimum, self.maximum) == 0

    def is_empty(self) -> bool:
        """True if no value is a member; only non-closed degenerate intervals are."""
        comparison = self.ordering.compare(self.minimum, self.maximum)
        if comparison > 0:
            return True
        if comparison < 0:
            return False
        return not (self.start_inclusive and self.end_inclusive)

    def on_start_endpoint(self, value: T) -> bool:
        value = self._point(value)
        return self.start_inclusive and self.ordering.compare(self.minimum, value) == 0

    def on_end_endpoint(self, value: T) -> bool:
        value = self._point(value)
        return self.end_inclusive and self.ordering.compare(self.maximum, value) == 0

    def contains(self, value: T) -> bool:
        value = self._point(value)
        start_cmp = self.ordering.compare(value, self.minimum)
        end_cmp = self.ordering.compare(value, self.maximum)
        after_start = start_cmp >= 0 if self.start_inclusive else start_cmp > 0
        before_end = end_cmp <= 0 if self.end_inclusive else end_cmp < 0
        return after_start and before_end

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def starts_after(self, value: T) -> bool:
        """True if every member is greater than ``value``."""
        comparison = self.ordering.compare(self.minimum, self._point(value))
        if comparison > 0:
            return True
        if comparison < 0:
            return False
        return self.start_exclusive

    def starts_after_strictly(self, value: T) -> bool:
        comparison = self.ordering.compare(self.minimum, self._point(value))
        return self.start_inclusive and comparison > 0

    def ends_before(self, value: T) -> bool:
        """True if every member is less than ``value``."""
        comparison = self.ordering.compare(self.maximum, self._point(value))
        if comparison < 0:
            return True
        if comparison > 0:
            return False
        return self.end_exclusive

    def ends_before_strictly(self, value: T) -> bool:
        comparison = self.ordering.compare(self.maximum, self._point(value))
        return self.end_inclusive and comparison < 0

    def contains_interval(self, other: "Interval[T] | EmptyInterval | None") -> bool:
        """True if every member of ``other`` is a member of this interval.

        Where endpoints coincide it is enough that ``other`` excludes the
        shared point or that this interval includes it.
        """
        if other is None:
            return False
        if isinstance(other, EmptyInterval):
            return True
        self._require_compatible(other)

        compare = self.ordering.compare
        start_cmp = compare(other.minimum, self.minimum)
        start_ok = start_cmp > 0 or (
            start_cmp == 0 and (other.start_exclusive or self.start_inclusive)
        )
        end_cmp = compare(other.maximum, self.maximum)
        end_ok = end_cmp < 0 or (
            end_cmp == 0 and (other.end_exclusive or self.end_inclusive)
        )
        return start_ok and end_ok

    def is_contained_by(self, other: "Interval[T] | EmptyInterval | None") -> bool:
        if other is None:
            return False
        return other.contains_interval(self)

    def overlaps(self, other: "Interval[T] | EmptyInterval | None") -> bool:
        """True if the intervals share at least one member.

        Intervals touching at a single point overlap only when both include
        that point.
        """
        if other is None or isinstance(other, EmptyInterval):
            return False
        self._require_compatible(other)
        if self.is_empty() or other.is_empty():
            return False

        compare = self.ordering.compare
        start_cmp = compare(self.minimum, other.maximum)
        if start_cmp > 0:
            return False
        if start_cmp == 0 and not (self.start_inclusive and other.end_inclusive):
            return False
        end_cmp = compare(self.maximum, other.minimum)
        if end_cmp < 0:
            return False
        return end_cmp != 0 or (self.end_inclusive and other.start_inclusive)

    def intersection(self, other: "Interval[T] | EmptyInterval | None") -> Self | None:
        """Return the common part of both intervals, or None if they are disjoint.

        Note: when ``other`` is None or empty this returns ``self`` unchanged,
        not the empty set, whatever kind ``other`` is. Callers needing strict
        set semantics must check ``other.is_empty()`` first.

        Raises:
            IncompatibleIntervalError: If a non-empty ``other`` uses a
                different ordering
        """
        if other is None or other.is_empty():
            return self
        self._require_compatible(other)
        if not self.overlaps(other):
            return None

        compare = self.ordering.compare
        start_cmp = compare(self.minimum, other.minimum)
        if start_cmp > 0:
            start, start_inclusive = self.minimum, self.start_inclusive
        elif start_cmp < 0:
            start, start_inclusive = other.minimum, other.start_inclusive
        else:
            start = self.minimum
            start_inclusive = self.start_inclusive and other.start_inclusive

        end_cmp = compare(self.maximum, other.maximum)
        if end_cmp < 0:
            end, end_inclusive = self.maximum, self.end_inclusive
        elif end_cmp > 0:
            end, end_inclusive = other.maximum, other.end_inclusive
        else:
            end = self.maximum
            end_inclusive = self.end_inclusive and other.end_inclusive

        return replace(
            self,
            minimum=start,
            maximum=end,
            interval_type=IntervalType.of(start_inclusive, end_inclusive),
        )

    def formatted_string(self) -> str:
        return format_interval(self.minimum, self.maximum, self.interval_type)

    @override
    def __str__(self) -> str:
        return self.formatted_string()

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        if type(self) is not type(other) or self.ordering != other.ordering:
            return False
        compare = self.ordering.compare
        return (
            self.interval_type is other.interval_type
            and compare(self.minimum, other.minimum) == 0
            and compare(self.maximum, other.maximum) == 0
        )

    @override
    def __hash__(self) -> int:
        return hash(
            (
                type(self),
                self.interval_type,
                self.ordering.hash_key(self.minimum),
                self.ordering.hash_key(self.maximum),
            )
        )
