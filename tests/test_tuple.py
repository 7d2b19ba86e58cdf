"""Tests for the (lower, upper, lower_inc, upper_inc) tuple codec."""

from typing import Any

import pytest

from pgranges import IntegerRange, InvalidRange, NumericRange, Range


def test_from_tuple_matches_text_form() -> None:
    assert IntegerRange.from_tuple([1, 10, True, False]) == IntegerRange.from_string("[1,10)")


def test_from_tuple_none_is_unbounded() -> None:
    r = NumericRange.from_tuple(None)

    assert r.lower is None
    assert r.upper is None
    assert r.lower_inc is True
    assert r.upper_inc is True


def test_from_tuple_empty_bound() -> None:
    r = NumericRange.from_tuple(("", 5.5, False, True))

    assert r.lower is None
    assert r.upper == 5.5
    assert r.to_string() == "(,5.5]"


def test_from_tuple_rejects_wrong_arity() -> None:
    with pytest.raises(ValueError, match="4 elements"):
        IntegerRange.from_tuple((1, 2))


def test_from_tuple_enforces_ordering() -> None:
    with pytest.raises(InvalidRange):
        IntegerRange.from_tuple((10, 1, True, True))


def test_from_tuple_never_rejects_oversized_bounds() -> None:
    """Bounds that overflow the scalar domain are coerced, not refused."""
    r = NumericRange.from_tuple((10**400, None, True, True))
    assert r.lower == 0.0

    r = IntegerRange.from_tuple((None, 2**64, False, True))
    assert r.upper == 2**63 - 1


def test_to_tuple() -> None:
    assert IntegerRange(1, 10, True, False).to_tuple() == (1, 10, True, False)
    assert NumericRange(None, 2.0, False, True).to_tuple() == (None, 2.0, False, True)


def test_to_tuple_without_bounds_is_none() -> None:
    assert IntegerRange(None, None).to_tuple() is None
    assert IntegerRange.from_tuple(None).to_tuple() is None


@pytest.mark.parametrize(
    "r",
    [
        IntegerRange(1, 10, True, False),
        IntegerRange(None, 3, False, True),
        NumericRange(0.5, 0.75, False, False),
        NumericRange(-1.5, None, True, False),
    ],
)
def test_tuple_round_trip(r: Range[Any]) -> None:
    assert type(r).from_tuple(r.to_tuple()) == r
