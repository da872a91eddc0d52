"""Failure reporting protocol shared by every matcher.

Purpose
-------
Turn an unmet expectation into the one-way exit from the current test: render a
diagnostic from the values involved and raise
:class:`~lib_fluent_expect.domain.errors.ExpectationFailed`. Nothing in this
module catches or recovers from that signal.

Contents
--------
* :func:`debug_format` – the debug formatter contract (``repr``), truncated when
  :attr:`ExpectSettings.max_repr_length` is set.
* :func:`describe` – build a :class:`FailureDiagnostic` from raw values.
* :func:`fail` – describe and raise in one call.
* :func:`raise_failure` – raise from an already evaluated failing result.

System Role
-----------
Capabilities call :func:`describe` to build failing check results; the root
expectation calls :func:`raise_failure`. Third-party matchers that do not want
the check/result machinery can call :func:`fail` directly.
"""

from __future__ import annotations

from typing import NoReturn

from ..domain.diagnostics import FailureDiagnostic
from ..domain.errors import ExpectationFailed
from ..domain.results import CheckResult
from ..observability import log_info, make_event
from ..settings import current_settings
from .ports import SupportsDebug

_ELLIPSIS = "..."


def debug_format(value: SupportsDebug) -> str:
    """Return the debug form of ``value``.

    Examples
    --------
    >>> debug_format('a')
    "'a'"
    >>> debug_format([1, 2])
    '[1, 2]'
    """

    text = repr(value)
    limit = current_settings().max_repr_length
    if limit is not None and len(text) > limit:
        return text[:limit] + _ELLIPSIS
    return text


def describe(description: str, **values: SupportsDebug) -> FailureDiagnostic:
    """Build a diagnostic whose fields are the debug forms of ``values``.

    Keyword order is kept, so pass ``expected`` before ``actual``.

    Examples
    --------
    >>> describe("Expectation failed (expected == actual)", expected=3, actual=2).fields
    (('expected', '3'), ('actual', '2'))
    """

    return FailureDiagnostic(description, tuple((label, debug_format(value)) for label, value in values.items()))


def fail(description: str, *, expected: SupportsDebug, actual: SupportsDebug, **extra: SupportsDebug) -> NoReturn:
    """Raise :class:`ExpectationFailed` describing ``expected`` versus ``actual``.

    Examples
    --------
    >>> fail("Expectation failed (expected == actual)", expected=3, actual=2)
    Traceback (most recent call last):
    ...
    lib_fluent_expect.domain.errors.ExpectationFailed: Expectation failed (expected == actual)
    expected: `3`
      actual: `2`
    """

    __tracebackhide__ = True
    raise_failure(CheckResult.failure(describe(description, expected=expected, actual=actual, **extra)))


def raise_failure(result: CheckResult, *, capability: str = "fail", check: str = "fail") -> NoReturn:
    """Raise the failure signal carried by a failing ``result``.

    Parameters
    ----------
    result:
        A failing result. Passing results are a programming error and raise
        :class:`ValueError`.
    capability / check:
        Names of the builder and check type reporting the failure, for logging.
    """

    __tracebackhide__ = True
    if result.passed:
        raise ValueError("raise_failure() needs a failing CheckResult")
    description = result.diagnostic.description if result.diagnostic is not None else None
    log_info("expectation_failed", **make_event(capability, check, {"description": description}))
    raise ExpectationFailed(result.message, diagnostic=result.diagnostic)
