"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by matcher capabilities, the failure
reporting protocol, and consuming test suites. The hierarchy lives in the domain
layer so every outer layer may raise it without import cycles.

Contents
--------
* :class:`ExpectationError` – umbrella base class for everything the library
  raises.
* :class:`ExpectationFailed` – the single, unrecoverable failure signal raised
  when a matcher predicate does not hold.
* :class:`CapabilityError` – misuse of the extension mechanism while composing
  expectation classes.
* :class:`ConfigurationError` – invalid settings values.

System Role
-----------
Test harnesses only need to recognise :class:`AssertionError`;
:class:`ExpectationFailed` subclasses it so pytest, unittest, and friends record
a failed test and print the diagnostic unchanged.
"""

from __future__ import annotations

from .diagnostics import FailureDiagnostic


class ExpectationError(Exception):
    """Base type for all exceptions emitted by ``lib_fluent_expect``.

    Why
    ----
    Provide a single catch-all type for harness integrations that want to tell
    library failures apart from arbitrary errors in test code.
    """


class ExpectationFailed(ExpectationError, AssertionError):
    """Raised when an expectation does not hold.

    Why
    ----
    An unmet expectation must abort the current test. Subclassing
    :class:`AssertionError` lets any harness treat it as a regular test failure.

    What
    ----
    Carries the rendered ``message`` and, when the failure came straight from a
    matcher, the :class:`FailureDiagnostic` it was rendered from. Failures
    aggregated from nested checks (projections) carry only the message.

    Attributes
    ----------
    message:
        Full diagnostic text, identical to ``str(error)``.
    diagnostic:
        Structured diagnostic or ``None`` for aggregated failures.
    """

    def __init__(self, message: str, *, diagnostic: FailureDiagnostic | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.diagnostic = diagnostic

    @property
    def description(self) -> str | None:
        """Header line describing the failed check."""

        return self.diagnostic.description if self.diagnostic is not None else None

    @property
    def expected(self) -> str | None:
        """Debug form of the expected value, when the check had one."""

        return self.diagnostic.field("expected") if self.diagnostic is not None else None

    @property
    def actual(self) -> str | None:
        """Debug form of the subject, when the check recorded it."""

        return self.diagnostic.field("actual") if self.diagnostic is not None else None


class CapabilityError(ExpectationError, TypeError):
    """Signals that something other than a capability was used as one.

    Typical Sources
    ---------------
    :func:`lib_fluent_expect.core.make_expect` and
    :func:`lib_fluent_expect.application.builder.compose` when handed classes
    that do not derive from :class:`~lib_fluent_expect.application.builder.Capability`.
    """


class ConfigurationError(ExpectationError, ValueError):
    """Raised when a settings value cannot be interpreted.

    Typical Sources
    ---------------
    Environment variables with the ``LIB_FLUENT_EXPECT_`` prefix and explicit
    calls to :func:`lib_fluent_expect.settings.configure`.
    """
