"""Expectations on zero-argument callables: what they raise or return.

The subject is called once per check, so it should be free of side effects that
matter to the test.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from ..application.builder import Capability, ExpectationBuilder
from ..application.failure import describe
from ..application.ports import Check
from ..domain.results import PASSED, CheckResult
from .predicate import SubjectCheck

T_co = TypeVar("T_co", covariant=True)
_CallableBuilder = TypeVar("_CallableBuilder", bound=ExpectationBuilder[Callable[[], Any]])

_NOTHING_RAISED = "nothing raised"


@dataclass(frozen=True)
class RaisesCheck:
    """Call the subject and expect an instance of ``exc_type``.

    Exceptions of other types propagate unchanged.
    """

    exc_type: type[BaseException] | tuple[type[BaseException], ...]
    match: str | None = None
    inner: Check[Any] | None = None

    def check(self, subject: Callable[[], Any]) -> CheckResult:
        try:
            returned = subject()
        except self.exc_type as error:
            if self.match is not None and re.search(self.match, str(error)) is None:
                return CheckResult.failure(
                    describe("Expectation failed (raised message matches pattern)", pattern=self.match, actual=error)
                )
            if self.inner is None:
                return PASSED
            return self.inner.check(error)
        return CheckResult.failure(
            describe(
                "Expectation failed (callable raises expected)",
                expected=self.exc_type,
                actual=_Returned(returned),
            )
        )


@dataclass(frozen=True)
class ReturnsCheck:
    """Call the subject and run ``inner`` (if any) on the return value."""

    inner: Check[Any] | None = None

    def check(self, subject: Callable[[], Any]) -> CheckResult:
        try:
            returned = subject()
        except Exception as error:
            return CheckResult.failure(
                describe("Expectation failed (callable returns)", expected=_NothingRaised(), actual=error)
            )
        if self.inner is None:
            return PASSED
        return self.inner.check(returned)


class CallableExpectations(Capability[T_co]):
    """Expect a callable to raise or to return normally."""

    def to_raise(
        self: _CallableBuilder,
        exc_type: type[BaseException] | tuple[type[BaseException], ...],
        *,
        match: str | None = None,
    ) -> _CallableBuilder:
        """Expect calling the subject to raise ``exc_type``.

        ``match`` is searched in ``str(error)`` with :func:`re.search`.

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect(lambda: int("x")).to_raise(ValueError, match="invalid literal")
        """

        return self.to_pass(RaisesCheck(exc_type, match))

    def to_raise_and(
        self: _CallableBuilder,
        exc_type: type[BaseException] | tuple[type[BaseException], ...],
        configure: Callable[[Any], object],
    ) -> _CallableBuilder:
        """Expect ``exc_type`` and run the expectations added by ``configure`` on the error."""

        expectations = self.nested()
        configure(expectations)
        return self.to_pass(RaisesCheck(exc_type, inner=expectations))

    def to_raise_matching(
        self: _CallableBuilder,
        exc_type: type[BaseException] | tuple[type[BaseException], ...],
        predicate: Callable[[Any], bool],
    ) -> _CallableBuilder:
        """Expect ``exc_type`` and an error for which ``predicate`` holds.

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect(lambda: {}["key"]).to_raise_matching(KeyError, lambda error: error.args == ("key",))
        """

        return self.to_pass(
            RaisesCheck(
                exc_type,
                inner=SubjectCheck(predicate, "Expectation failed (raised error matches predicate)"),
            )
        )

    def to_not_raise(self: _CallableBuilder) -> _CallableBuilder:
        return self.to_pass(ReturnsCheck())

    def to_return_and(self: _CallableBuilder, configure: Callable[[Any], object]) -> _CallableBuilder:
        """Expect a normal return and run the expectations added by ``configure`` on the value.

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect(lambda: 2 * 21).to_return_and(lambda value: value.to_equal(42))
        """

        expectations = self.nested()
        configure(expectations)
        return self.to_pass(ReturnsCheck(expectations))

    def to_return_matching(self: _CallableBuilder, predicate: Callable[[Any], bool]) -> _CallableBuilder:
        return self.to_pass(
            ReturnsCheck(SubjectCheck(predicate, "Expectation failed (returned value matches predicate)"))
        )


class _Returned:
    """Debug form ``returned <value>`` for a callable that did not raise."""

    def __init__(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"returned {self.value!r}"


class _NothingRaised:
    def __repr__(self) -> str:
        return _NOTHING_RAISED
