"""Public package surface for fluent expectations in tests.

Wrap whatever you have expectations on with :func:`expect` and chain matcher
calls on the result::

    from lib_fluent_expect import expect

    expect(1 + 1).to_equal(2)

Unmet expectations raise :class:`ExpectationFailed`, an :class:`AssertionError`,
with a diagnostic such as::

    Expectation failed (expected == actual)
    expected: `3`
      actual: `2`

New matchers are added by subclassing :class:`Capability` and combining it with
:func:`make_expect`.
"""

from __future__ import annotations

from .application.builder import (
    Capability,
    ExpectationBuilder,
    ExpectationList,
    ProjectedCheck,
    RootExpectation,
    compose,
)
from .application.failure import debug_format, describe, fail, raise_failure
from .application.ports import Check, SupportsDebug, SupportsOrdering
from .core import Expectations, expect, make_expect
from .domain.diagnostics import FailureDiagnostic
from .domain.errors import CapabilityError, ConfigurationError, ExpectationError, ExpectationFailed
from .domain.results import PASSED, CheckResult, combine
from .observability import bind_test_id, bound_test_id, get_logger
from .settings import ExpectSettings, configure, current_settings, settings_override
from .testing import expect_failure

__all__ = [
    "PASSED",
    "Capability",
    "CapabilityError",
    "Check",
    "CheckResult",
    "ConfigurationError",
    "ExpectSettings",
    "ExpectationBuilder",
    "ExpectationError",
    "ExpectationFailed",
    "ExpectationList",
    "Expectations",
    "FailureDiagnostic",
    "ProjectedCheck",
    "RootExpectation",
    "SupportsDebug",
    "SupportsOrdering",
    "bind_test_id",
    "bound_test_id",
    "combine",
    "compose",
    "configure",
    "current_settings",
    "debug_format",
    "describe",
    "expect",
    "expect_failure",
    "fail",
    "get_logger",
    "make_expect",
    "raise_failure",
    "settings_override",
]
