"""Predicate-based checks and the ``to_satisfy`` capability.

:class:`PredicateCheck` is the building block most bundled capabilities use: a
comparison value, a predicate ``(subject, expected) -> bool``, and the header
used when the predicate does not hold.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Self, TypeVar

from ..application.builder import Capability
from ..application.failure import describe
from ..domain.results import PASSED, CheckResult

T = TypeVar("T")
U = TypeVar("U")
T_co = TypeVar("T_co", covariant=True)


@dataclass(frozen=True)
class PredicateCheck(Generic[T, U]):
    """Check ``predicate(subject, expected)``.

    Attributes
    ----------
    expected:
        Comparison value handed to the predicate and shown in the diagnostic.
    predicate:
        Returns ``True`` when the expectation holds.
    description:
        Header of the failure diagnostic.
    expected_label / actual_label:
        Field labels used in the diagnostic.
    """

    expected: U
    predicate: Callable[[T, U], bool]
    description: str
    expected_label: str = "expected"
    actual_label: str = "actual"

    def check(self, subject: T) -> CheckResult:
        if self.predicate(subject, self.expected):
            return PASSED
        return CheckResult.failure(
            describe(self.description, **{self.expected_label: self.expected, self.actual_label: subject})
        )


@dataclass(frozen=True)
class SubjectCheck(Generic[T]):
    """Check ``predicate(subject)`` with no comparison value; only the subject is reported."""

    predicate: Callable[[T], bool]
    description: str

    def check(self, subject: T) -> CheckResult:
        if self.predicate(subject):
            return PASSED
        return CheckResult.failure(describe(self.description, actual=subject))


class PredicateExpectations(Capability[T_co]):
    """Expect the subject to satisfy an arbitrary predicate."""

    def to_satisfy(self, predicate: Callable[[Any], bool], description: str | None = None) -> Self:
        """Expect ``predicate(subject)`` to be truthy.

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect(4).to_satisfy(lambda n: n % 2 == 0, "even")
        """

        header = f"Expectation failed (actual satisfies {description or _predicate_name(predicate)})"
        return self.to_pass(SubjectCheck(lambda subject: bool(predicate(subject)), header))


def _predicate_name(predicate: Callable[..., Any]) -> str:
    name = getattr(predicate, "__name__", None)
    if not name or name == "<lambda>":
        return "predicate"
    return name
