from __future__ import annotations

from lib_fluent_expect.domain.diagnostics import FailureDiagnostic
from lib_fluent_expect.domain.results import PASSED, CheckResult, combine


def test_success_is_the_shared_passed_result() -> None:
    assert CheckResult.success() is PASSED
    assert PASSED.passed
    assert not PASSED.failed


def test_failure_from_diagnostic_keeps_it() -> None:
    diagnostic = FailureDiagnostic("header", (("actual", "1"),))
    result = CheckResult.failure(diagnostic)
    assert result.failed
    assert result.diagnostic is diagnostic
    assert result.message == "header\nactual: `1`"


def test_failure_from_text() -> None:
    result = CheckResult.failure("plain")
    assert result.message == "plain"
    assert result.diagnostic is None


def test_indented_passes_are_unchanged() -> None:
    assert PASSED.indented() is PASSED


def test_indented_failure_drops_diagnostic() -> None:
    result = CheckResult.failure(FailureDiagnostic("header", (("actual", "1"),))).indented()
    assert result.message == "  header\n  actual: `1`"
    assert result.diagnostic is None


def test_combine_keeps_single_failure_intact() -> None:
    failure = CheckResult.failure(FailureDiagnostic("header"))
    assert combine([PASSED, failure, PASSED]) is failure


def test_combine_reports_every_failure_in_order() -> None:
    combined = combine([CheckResult.failure("first"), PASSED, CheckResult.failure("second")])
    assert combined.failed
    assert combined.message == "first\nsecond"
    assert combined.diagnostic is None


def test_combine_of_nothing_passes() -> None:
    assert combine([]) is PASSED
