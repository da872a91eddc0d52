"""Composition root for ``lib_fluent_expect``.

Purpose
-------
Provide the entry points that wrap a subject in an expectation: :func:`expect`
for the bundled capability set and :func:`make_expect` for an explicit,
opt-in selection of capabilities (including third-party ones).

Contents
--------
* :class:`Expectations` – root expectation offering every bundled capability.
* :func:`expect` – wrap a subject in :class:`Expectations`.
* :func:`make_expect` – build an ``expect``-like entry point for chosen
  capabilities.

System Role
-----------
This module wires capabilities onto builders and holds no logic of its own.
Adding a capability never requires changes here: third parties pass their
:class:`~lib_fluent_expect.application.builder.Capability` subclasses to
:func:`make_expect` or subclass :class:`Expectations`.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from .application.builder import Capability, RootExpectation, compose
from .expectations import (
    BUNDLED,
    ApproximateExpectations,
    BooleanExpectations,
    CallableExpectations,
    EqualityExpectations,
    IterableExpectations,
    NoneExpectations,
    OrderExpectations,
    PredicateExpectations,
    StringExpectations,
    TruthinessExpectations,
)

T = TypeVar("T")


class Expectations(
    EqualityExpectations[T],
    ApproximateExpectations[T],
    OrderExpectations[T],
    BooleanExpectations[T],
    TruthinessExpectations[T],
    NoneExpectations[T],
    PredicateExpectations[T],
    StringExpectations[T],
    IterableExpectations[T],
    CallableExpectations[T],
    RootExpectation[T],
):
    """Root expectation with every bundled capability."""

    capabilities = BUNDLED


def expect(subject: T) -> Expectations[T]:
    """Create expectations for ``subject``.

    Why
    ----
    Single entry point for fluently building expectations in tests.

    What
    ----
    Wraps ``subject`` without inspecting it; construction cannot fail. Matchers
    chained on the result run immediately and raise
    :class:`~lib_fluent_expect.domain.errors.ExpectationFailed` on the first
    unmet expectation.

    Examples
    --------
    >>> _ = expect(1 + 1).to_equal(2).to_be_greater_than(1)
    >>> expect(1 + 1).to_equal(3)
    Traceback (most recent call last):
    ...
    lib_fluent_expect.domain.errors.ExpectationFailed: Expectation failed (expected == actual)
    expected: `3`
      actual: `2`
    """

    return Expectations(subject)


def make_expect(*capabilities: type[Capability[Any]]) -> Callable[[Any], RootExpectation[Any]]:
    """Return an entry point whose expectations offer only ``capabilities``.

    Parameters
    ----------
    capabilities:
        :class:`Capability` subclasses, bundled or third-party. Projections made
        from the resulting expectations offer the same set.

    Raises
    ------
    CapabilityError
        When an argument is not a :class:`Capability` subclass.

    Examples
    --------
    >>> from lib_fluent_expect.expectations import EqualityExpectations
    >>> expect_equal = make_expect(EqualityExpectations)
    >>> _ = expect_equal("a").to_equal("a")
    >>> hasattr(expect_equal("a"), "to_be_less_than")
    False
    """

    expectation_class = compose(RootExpectation, capabilities)

    def expect_with_capabilities(subject: Any) -> RootExpectation[Any]:
        return expectation_class(subject)

    return expect_with_capabilities
