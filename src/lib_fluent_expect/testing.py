"""Testing helpers for people writing their own capabilities.

Purpose
    Make the failure path of a matcher as easy to test as its passing path,
    without depending on a particular harness.

Contents
    - ``CapturedFailure``: holder for the failure raised inside the block.
    - ``expect_failure``: context manager asserting that the block raised
      :class:`~lib_fluent_expect.domain.errors.ExpectationFailed`.

System Integration
    Raises through the regular failure reporting protocol, so a block that
    unexpectedly passes is reported like any other unmet expectation.
"""

from __future__ import annotations

import re
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from .application.failure import fail
from .domain.errors import ExpectationFailed


@dataclass
class CapturedFailure:
    """The :class:`ExpectationFailed` captured by :func:`expect_failure`.

    ``error`` is ``None`` until the block has finished.
    """

    error: ExpectationFailed | None = None

    @property
    def message(self) -> str:
        if self.error is None:
            raise LookupError("no failure captured yet")
        return self.error.message


@contextmanager
def expect_failure(match: str | None = None) -> Iterator[CapturedFailure]:
    """Expect the block to raise :class:`ExpectationFailed`.

    Parameters
    ----------
    match:
        Optional pattern searched in the failure message with :func:`re.search`.

    Examples
    --------
    >>> from lib_fluent_expect import expect
    >>> with expect_failure(match="actual: `2`") as captured:
    ...     _ = expect(1 + 1).to_equal(3)
    >>> captured.error.expected
    '3'
    """

    __tracebackhide__ = True
    captured = CapturedFailure()
    try:
        yield captured
    except ExpectationFailed as error:
        captured.error = error
    else:
        fail("Expectation failed (block raises ExpectationFailed)", expected=ExpectationFailed, actual=None)
    if match is not None and re.search(match, captured.message) is None:
        fail("Expectation failed (failure message matches pattern)", expected=match, actual=captured.message)
