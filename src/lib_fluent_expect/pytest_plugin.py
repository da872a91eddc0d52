"""pytest plugin binding each test's node id to the expectation log events.

Enable it with ``-p lib_fluent_expect.pytest_plugin`` or, in a ``conftest.py``::

    pytest_plugins = ["lib_fluent_expect.pytest_plugin"]

Every ``expectation_failed`` (and ``expectation_passed``) record emitted while a
test runs then carries that test's node id as ``record.context["test_id"]``.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from .observability import bound_test_id


@pytest.fixture(autouse=True)
def _lib_fluent_expect_test_id(request: pytest.FixtureRequest) -> Iterator[str]:
    with bound_test_id(request.node.nodeid) as test_id:
        yield test_id
