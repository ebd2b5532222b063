import math

import pytest

from numrange import CHAR, FLOAT32, FLOAT64, INT16, NATURAL, ComparatorOrdering
from numrange.errors import MissingArgumentError, ValueKindError
from numrange.ordering import total_order_key


def test_natural_compare() -> None:
    assert NATURAL.compare(1, 2) == -1
    assert NATURAL.compare(2, 2) == 0
    assert NATURAL.compare("b", "a") == 1


def test_comparator_sign_is_normalized() -> None:
    ordering = ComparatorOrdering(function=lambda a, b: (a - b) * 100)

    assert ordering.compare(1, 5) == -1
    assert ordering.compare(5, 1) == 1
    assert ordering.compare(3, 3) == 0
    assert ordering.hash_key(3) is None


def test_comparator_orderings_compare_by_function() -> None:
    def compare(a: int, b: int) -> int:
        return a - b

    assert ComparatorOrdering(function=compare) == ComparatorOrdering(function=compare)
    assert ComparatorOrdering(function=compare) != ComparatorOrdering(function=lambda a, b: a - b)


class TestTotalOrder:
    """IEEE total order for the floating kinds."""

    def test_sequence_is_sorted(self) -> None:
        values = [-math.inf, -1.5, -0.0, 0.0, 2.0, math.inf, math.nan]

        assert sorted(reversed(values), key=total_order_key)[:-1] == values[:-1]
        assert math.isnan(sorted(values, key=total_order_key)[-1])

    def test_signed_zero(self) -> None:
        assert FLOAT64.compare(-0.0, 0.0) == -1
        assert FLOAT64.compare(0.0, -0.0) == 1
        assert FLOAT64.compare(0.0, 0.0) == 0

    def test_nan(self) -> None:
        assert FLOAT64.compare(math.nan, math.nan) == 0
        assert FLOAT64.compare(math.nan, math.inf) == 1
        assert FLOAT32.compare(-math.inf, math.nan) == -1
        assert FLOAT64.hash_key(math.nan) == FLOAT64.hash_key(float("nan"))


class TestCoerce:
    def test_none_names_argument(self) -> None:
        with pytest.raises(MissingArgumentError) as excinfo:
            INT16.coerce(None, "minimum")

        assert excinfo.value.name == "minimum"

    def test_integer_width(self) -> None:
        assert INT16.coerce(-32768) == -32768
        with pytest.raises(ValueKindError) as excinfo:
            INT16.coerce(32768)

        assert excinfo.value.kind == "short"

    def test_single_precision_rounding(self) -> None:
        assert FLOAT32.coerce(1 / 3) != 1 / 3
        assert FLOAT32.coerce(0.5) == 0.5
        assert math.copysign(1.0, FLOAT32.coerce(-0.0)) == -1.0

    def test_char(self) -> None:
        assert CHAR.compare("a", "b") == -1
        assert CHAR.coerce("\uffff") == "\uffff"
        with pytest.raises(ValueKindError):
            CHAR.coerce("")
