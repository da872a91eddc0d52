from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lib_fluent_expect import ExpectationFailed, expect


def test_to_equal_accepts_equal_values() -> None:
    expect("foo").to_equal("foo")


def test_to_equal_uses_native_equality_without_coercion() -> None:
    with pytest.raises(ExpectationFailed):
        expect("1").to_equal(1)


def test_to_not_equal() -> None:
    expect(1).to_not_equal(2)
    with pytest.raises(ExpectationFailed, match=r"expected != actual"):
        expect(1).to_not_equal(1)


def test_approximately_equal_within_tolerance() -> None:
    expect(0.1 + 0.2).to_approximately_equal(0.3)
    expect(100.0).to_approximately_equal(101.0, rel_tol=0.02)
    expect(0.0).to_approximately_equal(1e-12, abs_tol=1e-9)


def test_approximately_equal_outside_tolerance() -> None:
    with pytest.raises(ExpectationFailed) as excinfo:
        expect(1.0).to_approximately_equal(1.1)
    assert excinfo.value.expected == "1.1"
    assert excinfo.value.actual == "1.0"


def test_plain_equality_has_no_tolerance() -> None:
    with pytest.raises(ExpectationFailed):
        expect(0.1 + 0.2).to_equal(0.3)


@given(st.floats(allow_nan=False, allow_infinity=False, min_value=-1e6, max_value=1e6))
def test_approximately_equal_is_reflexive(value) -> None:
    expect(value).to_approximately_equal(value)


class MatchesAnything:
    def __eq__(self, other: object) -> bool:
        return True

    __hash__ = None  # type: ignore[assignment]


class MatchesNothing:
    def __eq__(self, other: object) -> bool:
        return False

    __hash__ = None  # type: ignore[assignment]


def test_equality_and_inequality_ask_the_expected_value_first() -> None:
    expect(MatchesNothing()).to_equal(MatchesAnything())
    with pytest.raises(ExpectationFailed, match=r"expected != actual"):
        expect(MatchesNothing()).to_not_equal(MatchesAnything())
