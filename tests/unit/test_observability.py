"""Unit tests for structured logging utilities in ``observability``.

Validates the null handler, test-id binding, event construction, and the events
emitted by the failure and pass paths.
"""

from __future__ import annotations

import logging

import pytest

from lib_fluent_expect import ExpectationFailed, bind_test_id, bound_test_id, expect, get_logger, settings_override
from lib_fluent_expect.observability import TEST_ID, log_info, make_event


@pytest.fixture(autouse=True)
def _clear_test_id():
    yield
    bind_test_id(None)


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler so the library stays silent."""

    logger = get_logger()
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_test_id_in_log(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="lib_fluent_expect")
    bind_test_id("test-123")
    log_info("checked", capability="Expectations", check="PredicateCheck")
    record = caplog.records[-1]
    assert getattr(record, "context") == {
        "test_id": "test-123",
        "capability": "Expectations",
        "check": "PredicateCheck",
    }


def test_bind_test_id_clears_context() -> None:
    bind_test_id("test-temp")
    bind_test_id(None)
    assert TEST_ID.get() is None


def test_make_event_merges_optional_payload() -> None:
    assert make_event("Expectations", "PredicateCheck", {"description": "d"}) == {
        "capability": "Expectations",
        "check": "PredicateCheck",
        "description": "d",
    }
    assert make_event("Expectations", "PredicateCheck") == {"capability": "Expectations", "check": "PredicateCheck"}


def test_failures_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="lib_fluent_expect")
    bind_test_id("tests/unit/test_observability.py::test_failures_are_logged")
    with pytest.raises(ExpectationFailed):
        expect(1).to_equal(2)
    record = caplog.records[-1]
    assert record.getMessage() == "expectation_failed"
    context = getattr(record, "context")
    assert context["test_id"] == "tests/unit/test_observability.py::test_failures_are_logged"
    assert context["check"] == "PredicateCheck"
    assert context["description"] == "Expectation failed (expected == actual)"


def test_passes_are_silent_by_default(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="lib_fluent_expect")
    with settings_override(log_passes=False):
        expect(1).to_equal(1)
    assert not [record for record in caplog.records if record.getMessage() == "expectation_passed"]


def test_passes_are_logged_on_request(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="lib_fluent_expect")
    with settings_override(log_passes=True):
        expect(1).to_equal(1)
    passed = [record for record in caplog.records if record.getMessage() == "expectation_passed"]
    assert len(passed) == 1


def test_bound_test_id_restores_previous_binding() -> None:
    bind_test_id("outer")
    with bound_test_id("inner") as active:
        assert active == "inner"
        assert TEST_ID.get() == "inner"
    assert TEST_ID.get() == "outer"


def test_bound_test_id_is_attached_to_failures(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="lib_fluent_expect")
    with bound_test_id("tests/api::test_ping"), pytest.raises(ExpectationFailed):
        expect("pong").to_equal("ping")
    assert getattr(caplog.records[-1], "context")["test_id"] == "tests/api::test_ping"
