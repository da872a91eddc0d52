"""String expectations."""

from __future__ import annotations

import re
from typing import TypeVar

from ..application.builder import Capability, ExpectationBuilder
from .predicate import PredicateCheck

T_co = TypeVar("T_co", covariant=True)
_StrBuilder = TypeVar("_StrBuilder", bound=ExpectationBuilder[str])


class StringExpectations(Capability[T_co]):
    """Substring, affix, and regular expression checks on ``str`` subjects."""

    def to_contain(self: _StrBuilder, substring: str) -> _StrBuilder:
        """Expect ``substring in subject``.

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect("hello world").to_contain("o w")
        """

        return self.to_pass(
            PredicateCheck(
                substring,
                lambda actual, needle: needle in actual,
                "Expectation failed (actual contains substring)",
                expected_label="substring",
            )
        )

    def to_start_with(self: _StrBuilder, prefix: str) -> _StrBuilder:
        return self.to_pass(
            PredicateCheck(
                prefix,
                lambda actual, wanted: actual.startswith(wanted),
                "Expectation failed (actual starts with prefix)",
                expected_label="prefix",
            )
        )

    def to_end_with(self: _StrBuilder, suffix: str) -> _StrBuilder:
        return self.to_pass(
            PredicateCheck(
                suffix,
                lambda actual, wanted: actual.endswith(wanted),
                "Expectation failed (actual ends with suffix)",
                expected_label="suffix",
            )
        )

    def to_match(self: _StrBuilder, pattern: str | re.Pattern[str]) -> _StrBuilder:
        """Expect :func:`re.search` to find ``pattern`` in the subject."""

        compiled = re.compile(pattern)
        return self.to_pass(
            PredicateCheck(
                compiled.pattern,
                lambda actual, _: compiled.search(actual) is not None,
                "Expectation failed (actual matches pattern)",
                expected_label="pattern",
            )
        )
