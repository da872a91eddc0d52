"""Outcome of evaluating a single check against a subject.

Purpose
-------
Model the transient pass/fail result a check produces before any builder decides
what to do with it. The root expectation raises on a failing result right away,
while expectation lists merge results from many checks first.

Contents
--------
* :class:`CheckResult` – pass, or fail with a rendered message.
* :data:`PASSED` – shared passing result.
* :func:`combine` – merge many results into one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterable

from .diagnostics import FailureDiagnostic, indent


@dataclass(frozen=True)
class CheckResult:
    """Pass/fail outcome of one check.

    Attributes
    ----------
    passed:
        ``True`` when the predicate held.
    message:
        Rendered failure text; empty for passing results.
    diagnostic:
        Structured diagnostic the message was rendered from, if any.
    """

    passed: bool
    message: str = ""
    diagnostic: FailureDiagnostic | None = None

    @classmethod
    def success(cls) -> CheckResult:
        return PASSED

    @classmethod
    def failure(cls, diagnostic: FailureDiagnostic | str) -> CheckResult:
        """Build a failing result from a diagnostic or from plain message text."""

        if isinstance(diagnostic, FailureDiagnostic):
            return cls(False, diagnostic.render(), diagnostic)
        return cls(False, diagnostic)

    @property
    def failed(self) -> bool:
        return not self.passed

    def indented(self) -> CheckResult:
        """Return a copy whose failure message is indented by two spaces.

        Passing results are returned unchanged. The structured diagnostic is
        dropped because the message no longer matches its layout.
        """

        if self.passed:
            return self
        return CheckResult(False, indent(self.message))


PASSED: Final[CheckResult] = CheckResult(True)


def combine(results: Iterable[CheckResult]) -> CheckResult:
    """Merge results, reporting every failure in order.

    A single failure keeps its diagnostic; several failures are joined with
    newlines into one message.

    Examples
    --------
    >>> combine([PASSED, CheckResult.failure("a"), CheckResult.failure("b")]).message
    'a\\nb'
    >>> combine([]).passed
    True
    """

    failures = [result for result in results if result.failed]
    if not failures:
        return PASSED
    if len(failures) == 1:
        return failures[0]
    return CheckResult(False, "\n".join(failure.message for failure in failures))
