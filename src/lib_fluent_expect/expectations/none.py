"""Expectations on optional subjects (``T | None``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Self, TypeVar

from ..application.builder import Capability
from ..application.failure import describe
from ..application.ports import Check
from ..domain.results import PASSED, CheckResult
from .predicate import SubjectCheck

T_co = TypeVar("T_co", covariant=True)

NOT_NONE_DESCRIPTION = "Expectation failed (actual is not None)"


@dataclass(frozen=True)
class PresentCheck:
    """Fail on ``None``; otherwise delegate to ``inner`` when given."""

    inner: Check[Any] | None = None

    def check(self, subject: Any) -> CheckResult:
        if subject is None:
            return CheckResult.failure(describe(NOT_NONE_DESCRIPTION, actual=subject))
        if self.inner is None:
            return PASSED
        return self.inner.check(subject)


class NoneExpectations(Capability[T_co]):
    """Expect an optional subject to be ``None`` or to hold a value."""

    def to_be_none(self) -> Self:
        return self.to_pass(SubjectCheck(lambda subject: subject is None, "Expectation failed (actual is None)"))

    def to_not_be_none(self) -> Self:
        return self.to_pass(PresentCheck())

    def to_not_be_none_matching(self, predicate: Callable[[Any], bool]) -> Self:
        """Expect a value that satisfies ``predicate``.

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect(42).to_not_be_none_matching(lambda value: value > 40)
        """

        return self.to_pass(
            PresentCheck(
                SubjectCheck(
                    lambda subject: bool(predicate(subject)),
                    "Expectation failed (value is not None and matches predicate)",
                )
            )
        )

    def to_not_be_none_and(self, configure: Callable[[Any], object]) -> Self:
        """Expect a value and run the expectations added by ``configure`` on it.

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect("abc").to_not_be_none_and(lambda value: value.to_equal("abc"))
        """

        expectations = self.nested()
        configure(expectations)
        return self.to_pass(PresentCheck(expectations))
