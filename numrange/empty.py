from typing import Any, ClassVar

from .errors import EmptyIntervalError
from .formatter import EMPTY_SYMBOL
from .interval_type import IntervalType


class EmptyInterval:
    """Sentinel for the interval containing no values.

    Distinct from any regular interval: it has no endpoints and relates to
    other intervals only through emptiness.
    """

    _instance: ClassVar["EmptyInterval | None"] = None

    def __new__(cls) -> "EmptyInterval":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def empty(cls) -> "EmptyInterval":
        return cls()

    @property
    def minimum(self) -> Any:
        raise EmptyIntervalError("minimum")

    @property
    def maximum(self) -> Any:
        raise EmptyIntervalError("maximum")

    @property
    def interval_type(self) -> IntervalType:
        return IntervalType.OPEN

    @property
    def start_inclusive(self) -> bool:
        return False

    @property
    def end_inclusive(self) -> bool:
        return False

    def is_degenerate(self) -> bool:
        return False

    def is_empty(self) -> bool:
        return True

    def on_start_endpoint(self, value: Any) -> bool:
        return False

    def on_end_endpoint(self, value: Any) -> bool:
        return False

    def contains(self, value: Any) -> bool:
        return False

    def __contains__(self, value: Any) -> bool:
        return False

    def contains_interval(self, other: Any) -> bool:
        return other is not None and other.is_empty()

    def is_contained_by(self, other: Any) -> bool:
        return other is not None

    def overlaps(self, other: Any) -> bool:
        return False

    def intersection(self, other: Any) -> "EmptyInterval":
        return self

    def starts_after(self, value: Any) -> bool:
        return False

    def starts_after_strictly(self, value: Any) -> bool:
        return False

    def ends_before(self, value: Any) -> bool:
        return False

    def ends_before_strictly(self, value: Any) -> bool:
        return False

    def formatted_string(self) -> str:
        return EMPTY_SYMBOL

    def __str__(self) -> str:
        return self.formatted_string()

    def __repr__(self) -> str:
        return "EmptyInterval()"


EMPTY: EmptyInterval = EmptyInterval()
