"""Ordering expectations for subjects supporting rich comparisons."""

from __future__ import annotations

import operator
from typing import Any, Container, TypeVar

from ..application.builder import Capability, ExpectationBuilder
from ..application.ports import SupportsOrdering
from .predicate import PredicateCheck

T_co = TypeVar("T_co", covariant=True)
_OrderedBuilder = TypeVar("_OrderedBuilder", bound=ExpectationBuilder[SupportsOrdering])
_AnyBuilder = TypeVar("_AnyBuilder", bound=ExpectationBuilder[Any])


class OrderExpectations(Capability[T_co]):
    """Expectations based on ``<``, ``<=``, ``>``, ``>=`` and membership in bounds."""

    def to_be_less_than(self: _OrderedBuilder, value: Any) -> _OrderedBuilder:
        return self.to_pass(PredicateCheck(value, operator.lt, "Expectation failed (actual < expected)"))

    def to_be_less_than_or_equal(self: _OrderedBuilder, value: Any) -> _OrderedBuilder:
        return self.to_pass(PredicateCheck(value, operator.le, "Expectation failed (actual <= expected)"))

    def to_be_greater_than(self: _OrderedBuilder, value: Any) -> _OrderedBuilder:
        return self.to_pass(PredicateCheck(value, operator.gt, "Expectation failed (actual > expected)"))

    def to_be_greater_than_or_equal(self: _OrderedBuilder, value: Any) -> _OrderedBuilder:
        return self.to_pass(PredicateCheck(value, operator.ge, "Expectation failed (actual >= expected)"))

    def to_be_between(self: _OrderedBuilder, lower: Any, upper: Any, *, inclusive: bool = True) -> _OrderedBuilder:
        """Expect ``lower <= subject <= upper`` (strict comparisons when not ``inclusive``).

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect(5).to_be_between(1, 5)
        >>> _ = expect(5).to_be_between(1, 10, inclusive=False)
        """

        if inclusive:
            return self.to_pass(
                PredicateCheck(
                    (lower, upper),
                    lambda actual, bounds: bounds[0] <= actual <= bounds[1],
                    "Expectation failed (lower <= actual <= upper)",
                    expected_label="bounds",
                )
            )
        return self.to_pass(
            PredicateCheck(
                (lower, upper),
                lambda actual, bounds: bounds[0] < actual < bounds[1],
                "Expectation failed (lower < actual < upper)",
                expected_label="bounds",
            )
        )

    def to_be_inside(self: _AnyBuilder, bounds: Container[Any]) -> _AnyBuilder:
        """Expect ``subject in bounds``, typically a :class:`range`.

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect(5).to_be_inside(range(1, 6))
        """

        return self.to_pass(
            PredicateCheck(
                bounds,
                lambda actual, container: actual in container,
                "Expectation failed (actual in range)",
                expected_label="range",
            )
        )
