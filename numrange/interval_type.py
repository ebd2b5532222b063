from enum import Enum


class IntervalType(Enum):
    """Endpoint inclusiveness of an interval.

    Each member's value is the ``(start_inclusive, end_inclusive)`` pair, so
    members compare and hash by those two booleans only.

    ============  ========  ==================================
    Member        Notation  Meaning
    ============  ========  ==================================
    CLOSED        [a, b]    inclusive start, inclusive end
    OPEN          (a, b)    exclusive start, exclusive end
    CLOSED_OPEN   [a, b)    inclusive start, exclusive end
    OPEN_CLOSED   (a, b]    exclusive start, inclusive end
    ============  ========  ==================================
    """

    CLOSED = (True, True)
    OPEN = (False, False)
    CLOSED_OPEN = (True, False)
    OPEN_CLOSED = (False, True)

    @classmethod
    def of(cls, start_inclusive: bool, end_inclusive: bool) -> "IntervalType":
        """Return the member matching the given inclusiveness flags.

        Example:
            >>> IntervalType.of(True, False)
            <IntervalType.CLOSED_OPEN: (True, False)>
        """
        return cls((bool(start_inclusive), bool(end_inclusive)))

    @property
    def start_inclusive(self) -> bool:
        return self.value[0]

    @property
    def end_inclusive(self) -> bool:
        return self.value[1]

    @property
    def start_exclusive(self) -> bool:
        return not self.start_inclusive

    @property
    def end_exclusive(self) -> bool:
        return not self.end_inclusive

    @property
    def start_symbol(self) -> str:
        return "[" if self.start_inclusive else "("

    @property
    def end_symbol(self) -> str:
        return "]" if self.end_inclusive else ")"

    def __str__(self) -> str:
        """Human-readable name, e.g. ``Closed Open Interval``."""
        words = self.name.split("_") + ["INTERVAL"]
        return " ".join(word.capitalize() for word in words)
