"""Equality expectations.

Equality uses the subject type's own ``==``: no coercion and no tolerance.
Floating point comparisons with a tolerance live in the separate
:class:`ApproximateExpectations` capability.
"""

from __future__ import annotations

import math
from typing import Final, Self, SupportsFloat, TypeVar

from ..application.builder import Capability, ExpectationBuilder
from .predicate import PredicateCheck

T_co = TypeVar("T_co", covariant=True)
_FloatBuilder = TypeVar("_FloatBuilder", bound=ExpectationBuilder[SupportsFloat])

EQUAL_DESCRIPTION: Final[str] = "Expectation failed (expected == actual)"
NOT_EQUAL_DESCRIPTION: Final[str] = "Expectation failed (expected != actual)"
APPROXIMATE_DESCRIPTION: Final[str] = "Expectation failed (expected ≈ actual)"


class EqualityExpectations(Capability[T_co]):
    """Expectations based on ``==``."""

    def to_equal(self, expected: object) -> Self:
        """Expect the subject to equal ``expected``.

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect(1 + 1).to_equal(2)
        >>> expect(1 + 1).to_equal(3)
        Traceback (most recent call last):
        ...
        lib_fluent_expect.domain.errors.ExpectationFailed: Expectation failed (expected == actual)
        expected: `3`
          actual: `2`
        """

        return self.to_pass(PredicateCheck(expected, _equals, EQUAL_DESCRIPTION))

    def to_not_equal(self, expected: object) -> Self:
        """Expect the subject to differ from ``expected``."""

        return self.to_pass(PredicateCheck(expected, _differs, NOT_EQUAL_DESCRIPTION))


class ApproximateExpectations(Capability[T_co]):
    """Tolerance-based equality for numbers convertible to ``float``."""

    def to_approximately_equal(
        self: _FloatBuilder,
        expected: SupportsFloat,
        *,
        rel_tol: float = 1e-9,
        abs_tol: float = 0.0,
    ) -> _FloatBuilder:
        """Expect :func:`math.isclose` to hold for the subject and ``expected``.

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect(0.1 + 0.2).to_approximately_equal(0.3)
        """

        return self.to_pass(
            PredicateCheck(
                expected,
                lambda actual, wanted: math.isclose(float(actual), float(wanted), rel_tol=rel_tol, abs_tol=abs_tol),
                APPROXIMATE_DESCRIPTION,
            )
        )


def _equals(actual: object, expected: object) -> bool:
    # expected on the left, matching the "expected == actual" header
    return bool(expected == actual)


def _differs(actual: object, expected: object) -> bool:
    return bool(expected != actual)
