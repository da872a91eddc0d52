"""Structured log events for evaluated expectations.

Purpose
    Report failures (and, on request, passes) through the standard ``logging``
    machinery with enough context to trace them back to the test that made them.
    The package logger carries a ``NullHandler``, so nothing is printed unless
    the host attaches a handler or enables capture.

Contents
    - ``TEST_ID``: context variable holding the node id of the running test.
    - ``get_logger``: the package logger.
    - ``bind_test_id`` / ``bound_test_id``: set the test id, permanently or for a
      block.
    - ``log_debug`` / ``log_info``: emit an event with its structured context.
    - ``make_event``: event payload naming the builder and the check type.

Event context
    Every record carries ``extra={"context": {...}}`` with ``test_id`` first,
    followed by the event fields. Handlers read ``record.context``.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Final, Iterator, Mapping

TEST_ID: ContextVar[str | None] = ContextVar("lib_fluent_expect_test_id", default=None)

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_fluent_expect")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    return _LOGGER


def bind_test_id(test_id: str | None) -> None:
    """Bind ``test_id`` for the rest of the current context; ``None`` clears it.

    Examples
    --------
    >>> bind_test_id('tests/unit/test_core.py::test_equal')
    >>> TEST_ID.get()
    'tests/unit/test_core.py::test_equal'
    >>> bind_test_id(None)
    >>> TEST_ID.get() is None
    True
    """

    TEST_ID.set(test_id)


@contextmanager
def bound_test_id(test_id: str) -> Iterator[str]:
    """Bind ``test_id`` while the block runs, restoring the previous binding after.

    Examples
    --------
    >>> with bound_test_id('tests/test_api.py::test_ping'):
    ...     TEST_ID.get()
    'tests/test_api.py::test_ping'
    >>> TEST_ID.get() is None
    True
    """

    token = TEST_ID.set(test_id)
    try:
        yield test_id
    finally:
        TEST_ID.reset(token)


def log_debug(message: str, **fields: Any) -> None:
    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    _emit(logging.INFO, message, fields)


def make_event(
    capability: str,
    check: str,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Name the builder and check type behind an event, plus optional detail.

    Examples
    --------
    >>> make_event('Expectations', 'PredicateCheck', {'description': 'x'})
    {'capability': 'Expectations', 'check': 'PredicateCheck', 'description': 'x'}
    """

    event: dict[str, Any] = {"capability": capability, "check": check}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    if not _LOGGER.isEnabledFor(level):
        return
    _LOGGER.log(level, message, extra={"context": {"test_id": TEST_ID.get(), **fields}})
