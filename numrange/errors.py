from typing import Any


class IntervalError(Exception):
    """Base class for every error raised by numrange."""


class InvalidEndpointsError(IntervalError, ValueError):
    def __init__(self, minimum: Any, maximum: Any):
        self.minimum: Any = minimum
        self.maximum: Any = maximum
        super().__init__(
            f"Illegal interval endpoints: minimum ({minimum!r}) > maximum ({maximum!r}).\n"
            f"Interval bounds are never swapped automatically.\n"
            f"Fix: pass the smaller endpoint first, e.g. of({maximum!r}, {minimum!r}, ...)"
        )


class MissingArgumentError(IntervalError, TypeError):
    def __init__(self, name: str):
        self.name: str = name
        super().__init__(f"Required argument {name!r} must not be None.")


class ValueKindError(IntervalError, ValueError):
    def __init__(self, value: Any, kind: str, reason: str):
        self.value: Any = value
        self.kind: str = kind
        super().__init__(
            f"Value {value!r} is not a valid {kind}: {reason}."
        )


class IncompatibleIntervalError(IntervalError, TypeError):
    def __init__(self, left: str, right: str):
        super().__init__(
            f"Cannot relate an interval over {left} with one over {right}.\n"
            f"Hint: build both intervals with the same numeric kind, "
            f"e.g. IntInterval.of(...) on both sides."
        )


class EmptyIntervalError(IntervalError, LookupError):
    def __init__(self, attribute: str):
        super().__init__(f"An empty interval does not have a {attribute} value.")
