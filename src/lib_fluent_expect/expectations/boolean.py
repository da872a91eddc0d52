"""Boolean and truthiness expectations."""

from __future__ import annotations

from typing import Self, TypeVar

from ..application.builder import Capability, ExpectationBuilder
from .predicate import PredicateCheck, SubjectCheck

T_co = TypeVar("T_co", covariant=True)
_BoolBuilder = TypeVar("_BoolBuilder", bound=ExpectationBuilder[bool])


class BooleanExpectations(Capability[T_co]):
    """Expect a ``bool`` subject to be exactly ``True`` or ``False``.

    Identity is used, so ``1`` does not pass ``to_be_true``.
    """

    def to_be_true(self: _BoolBuilder) -> _BoolBuilder:
        return self.to_pass(PredicateCheck(True, _is, "Expectation failed (actual is True)"))

    def to_be_false(self: _BoolBuilder) -> _BoolBuilder:
        return self.to_pass(PredicateCheck(False, _is, "Expectation failed (actual is False)"))


class TruthinessExpectations(Capability[T_co]):
    """Expect any subject to be truthy or falsy under :func:`bool`."""

    def to_be_truthy(self) -> Self:
        return self.to_pass(SubjectCheck(bool, "Expectation failed (actual is truthy)"))

    def to_be_falsy(self) -> Self:
        return self.to_pass(SubjectCheck(lambda subject: not subject, "Expectation failed (actual is falsy)"))


def _is(actual: object, expected: object) -> bool:
    return actual is expected
