from __future__ import annotations

import pytest

from lib_fluent_expect import ExpectationFailed, expect


def test_to_be_true_and_false() -> None:
    expect(True).to_be_true()
    expect(False).to_be_false()


def test_to_be_true_is_identity_based() -> None:
    with pytest.raises(ExpectationFailed) as excinfo:
        expect(1).to_be_true()
    assert excinfo.value.expected == "True"
    assert excinfo.value.actual == "1"


def test_to_be_false_rejects_true() -> None:
    with pytest.raises(ExpectationFailed):
        expect(True).to_be_false()


@pytest.mark.parametrize("value", [1, "x", [1], object()])
def test_truthy(value) -> None:
    expect(value).to_be_truthy()
    with pytest.raises(ExpectationFailed, match="actual is falsy"):
        expect(value).to_be_falsy()


@pytest.mark.parametrize("value", [0, "", [], None])
def test_falsy(value) -> None:
    expect(value).to_be_falsy()
    with pytest.raises(ExpectationFailed, match="actual is truthy"):
        expect(value).to_be_truthy()
