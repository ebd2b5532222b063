import pytest

from numrange import IntervalType


@pytest.mark.parametrize(
    ("start_inclusive", "end_inclusive", "expected"),
    [
        (True, True, IntervalType.CLOSED),
        (False, False, IntervalType.OPEN),
        (True, False, IntervalType.CLOSED_OPEN),
        (False, True, IntervalType.OPEN_CLOSED),
    ],
)
def test_of_returns_canonical_member(
    start_inclusive: bool, end_inclusive: bool, expected: IntervalType
) -> None:
    result = IntervalType.of(start_inclusive, end_inclusive)

    assert result is expected
    assert result.start_inclusive is start_inclusive
    assert result.end_inclusive is end_inclusive
    assert result.start_exclusive is not start_inclusive
    assert result.end_exclusive is not end_inclusive


def test_of_accepts_truthy_flags() -> None:
    assert IntervalType.of(1, 0) is IntervalType.CLOSED_OPEN


def test_symbols() -> None:
    assert (IntervalType.CLOSED.start_symbol, IntervalType.CLOSED.end_symbol) == ("[", "]")
    assert (IntervalType.OPEN.start_symbol, IntervalType.OPEN.end_symbol) == ("(", ")")
    assert IntervalType.CLOSED_OPEN.start_symbol + IntervalType.CLOSED_OPEN.end_symbol == "[)"
    assert IntervalType.OPEN_CLOSED.start_symbol + IntervalType.OPEN_CLOSED.end_symbol == "(]"


def test_str_is_title_case_name() -> None:
    assert str(IntervalType.CLOSED) == "Closed Interval"
    assert str(IntervalType.OPEN_CLOSED) == "Open Closed Interval"


def test_compared_by_value() -> None:
    assert IntervalType((True, False)) == IntervalType.CLOSED_OPEN
    assert IntervalType.CLOSED != IntervalType.OPEN
    assert len({IntervalType.of(a, b) for a in (True, False) for b in (True, False)}) == 4
