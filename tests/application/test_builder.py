"""Builder tests: immediate versus deferred evaluation and projections."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from lib_fluent_expect import (
    PASSED,
    CheckResult,
    ExpectationBuilder,
    ExpectationFailed,
    ExpectationList,
    RootExpectation,
    compose,
    expect,
)
from lib_fluent_expect.expectations import EqualityExpectations


@dataclass
class RecordingCheck:
    """Check returning a fixed result and remembering the subjects it saw."""

    result: CheckResult = PASSED
    seen: list[object] = field(default_factory=list)

    def check(self, subject: object) -> CheckResult:
        self.seen.append(subject)
        return self.result


@dataclass(frozen=True)
class Service:
    name: str
    port: int


def test_root_runs_checks_immediately() -> None:
    recorder = RecordingCheck()
    expect("subject").to_pass(recorder)
    assert recorder.seen == ["subject"]


def test_root_raises_on_failing_check() -> None:
    with pytest.raises(ExpectationFailed, match="^message$"):
        expect(True).to_pass(RecordingCheck(CheckResult.failure("message")))


def test_list_defers_checks() -> None:
    recorder = RecordingCheck()
    expectations = ExpectationList().to_pass(recorder)
    assert recorder.seen == []
    assert len(expectations) == 1
    assert expectations.check(7).passed
    assert recorder.seen == [7]


def test_list_runs_every_check_and_reports_every_failure() -> None:
    first = RecordingCheck(CheckResult.failure("first"))
    second = RecordingCheck(CheckResult.failure("second"))
    result = ExpectationList().to_pass(first).to_pass(second).check(1)
    assert first.seen == [1] and second.seen == [1]
    assert result.message == "first\nsecond"


def test_base_builder_is_abstract() -> None:
    with pytest.raises(NotImplementedError):
        ExpectationBuilder().to_pass(RecordingCheck())


def test_projection_runs_nested_checks_on_projected_value() -> None:
    first = RecordingCheck()
    second = RecordingCheck()
    expect(Service("api", 8080)).projected_by(lambda it: it.port, lambda port: port.to_pass(first).to_pass(second))
    assert first.seen == [8080]
    assert second.seen == [8080]


def test_projection_indents_nested_failures() -> None:
    with pytest.raises(ExpectationFailed) as excinfo:
        expect(Service("api", 8080)).projected_by(
            lambda it: it.port,
            lambda port: port.to_equal(80).to_be_less_than(1024),
        )
    lines = excinfo.value.message.splitlines()
    assert all(line.startswith("  ") for line in lines)
    assert "  Expectation failed (expected == actual)" in lines
    assert "  Expectation failed (actual < expected)" in lines


def test_projections_nest_deeply() -> None:
    recorder = RecordingCheck()
    expect(True).projected_by(
        lambda _: 1,
        lambda it: it.projected_by(
            lambda _: 1.0,
            lambda it: it.projected_by(lambda _: "foo", lambda it: it.to_pass(recorder)),
        ),
    )
    assert recorder.seen == ["foo"]


def test_nested_failures_indent_per_level() -> None:
    with pytest.raises(ExpectationFailed) as excinfo:
        expect({"a": {"b": 1}}).projected_by(
            lambda it: it["a"],
            lambda a: a.projected_by(lambda it: it["b"], lambda b: b.to_equal(2)),
        )
    assert excinfo.value.message.splitlines()[0] == "    Expectation failed (expected == actual)"


def test_projection_keeps_chaining_on_parent() -> None:
    service = Service("api", 8080)
    (
        expect(service)
        .projected_by(lambda it: it.name, lambda name: name.to_start_with("a"))
        .projected_by(lambda it: it.port, lambda port: port.to_be_greater_than(1024))
        .to_equal(service)
    )


def test_nested_builder_offers_the_parent_capabilities() -> None:
    cls = compose(RootExpectation, (EqualityExpectations,))
    nested = cls(1).nested()
    assert isinstance(nested, ExpectationList)
    assert isinstance(nested, EqualityExpectations)
    assert not hasattr(nested, "to_be_less_than")


def test_compose_without_capabilities_returns_base() -> None:
    assert compose(RootExpectation, ()) is RootExpectation


def test_root_repr_shows_subject() -> None:
    assert repr(expect([1])) == "Expectations([1])"


def test_subclass_capabilities_come_from_the_mro() -> None:
    class Combined(EqualityExpectations[object], RootExpectation[object]):
        pass

    assert Combined.capabilities == (EqualityExpectations,)
    assert isinstance(Combined(1).nested(), EqualityExpectations)


def test_capabilities_of_skips_builders() -> None:
    from lib_fluent_expect.application.builder import capabilities_of
    from lib_fluent_expect.expectations import BUNDLED

    assert set(capabilities_of(type(expect(1)))) == set(BUNDLED)
    assert capabilities_of(RootExpectation) == ()
