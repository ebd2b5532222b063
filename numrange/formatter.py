from typing import Any

from .interval_type import IntervalType

EMPTY_SYMBOL = "∅"


def format_interval(minimum: Any, maximum: Any, interval_type: IntervalType) -> str:
    """Render endpoints in bracket notation, e.g. ``[1, 3)``."""
    return (
        f"{interval_type.start_symbol}{minimum}, {maximum}{interval_type.end_symbol}"
    )
