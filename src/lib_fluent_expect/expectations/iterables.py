"""Expectations on iterable subjects.

Every check iterates the subject afresh, so subjects should be re-iterable
collections; a one-shot iterator is exhausted by the first check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, TypeVar

from ..application.builder import Capability, ExpectationBuilder
from ..application.failure import describe
from ..domain.results import PASSED, CheckResult
from .equality import EQUAL_DESCRIPTION
from .predicate import PredicateCheck, SubjectCheck

T_co = TypeVar("T_co", covariant=True)
_IterableBuilder = TypeVar("_IterableBuilder", bound=ExpectationBuilder[Iterable[Any]])

_SENTINEL = object()


@dataclass(frozen=True)
class InAnyOrderCheck:
    """Match every subject item to a distinct expected item, ignoring order.

    On failure the diagnostic lists subject items without a partner (``extra``)
    and expected items left over (``unmatched``).
    """

    expected: tuple[Any, ...]

    def check(self, subject: Iterable[Any]) -> CheckResult:
        items = list(subject)
        remaining = list(self.expected)
        extras = []
        for item in items:
            for position, candidate in enumerate(remaining):
                if candidate == item:
                    del remaining[position]
                    break
            else:
                extras.append(item)
        if not remaining and not extras:
            return PASSED
        return CheckResult.failure(
            describe(
                "Expectation failed (expected ≅ actual, any order)",
                expected=list(self.expected),
                actual=items,
                extra=extras,
                unmatched=remaining,
            )
        )


class IterableExpectations(Capability[T_co]):
    """Length, emptiness, membership, and sequence equivalence checks."""

    def count(self: _IterableBuilder, configure: Callable[[Any], object]) -> _IterableBuilder:
        """Run the expectations added by ``configure`` on the number of items.

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect([1, 2, 3]).count(lambda count: count.to_be_greater_than(2))
        """

        return self.projected_by(_count, configure)

    def to_have_length(self: _IterableBuilder, length: int) -> _IterableBuilder:
        return self.to_pass(
            PredicateCheck(
                length,
                lambda actual, wanted: _count(actual) == wanted,
                "Expectation failed (len(actual) == length)",
                expected_label="length",
            )
        )

    def to_be_empty(self: _IterableBuilder) -> _IterableBuilder:
        return self.to_pass(SubjectCheck(_is_empty, "Expectation failed (actual is empty)"))

    def to_not_be_empty(self: _IterableBuilder) -> _IterableBuilder:
        return self.to_pass(
            SubjectCheck(lambda subject: not _is_empty(subject), "Expectation failed (actual is not empty)")
        )

    def to_contain_equal_to(self: _IterableBuilder, item: Any) -> _IterableBuilder:
        """Expect at least one subject item to equal ``item``.

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect(["a", "b"]).to_contain_equal_to("b")
        """

        return self.to_pass(
            PredicateCheck(
                item,
                lambda actual, needle: _contains_all_of(actual, [needle]),
                "Expectation failed (actual contains item)",
                expected_label="item",
            )
        )

    def to_contain_equal_to_all_of(self: _IterableBuilder, items: Iterable[Any]) -> _IterableBuilder:
        return self.to_pass(
            PredicateCheck(
                list(items),
                _contains_all_of,
                "Expectation failed (actual ⊇ items)",
                expected_label="items",
            )
        )

    def to_be_equivalent_to(self: _IterableBuilder, items: Iterable[Any]) -> _IterableBuilder:
        """Expect the same items in the same order, compared item by item with ``==``."""

        return self.to_pass(PredicateCheck(list(items), _pairwise_equal, EQUAL_DESCRIPTION))

    def to_be_equivalent_to_in_any_order(self: _IterableBuilder, items: Iterable[Any]) -> _IterableBuilder:
        """Expect the same items as a multiset: counts matter, order does not.

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect([3, 1, 2, 1]).to_be_equivalent_to_in_any_order([1, 1, 2, 3])
        """

        return self.to_pass(InAnyOrderCheck(tuple(items)))


def _count(subject: Iterable[Any]) -> int:
    return sum(1 for _ in subject)


def _is_empty(subject: Iterable[Any]) -> bool:
    return next(iter(subject), _SENTINEL) is _SENTINEL


def _contains_all_of(actual: Iterable[Any], needles: list[Any]) -> bool:
    items = list(actual)
    return all(any(candidate == needle for candidate in items) for needle in needles)


def _pairwise_equal(actual: Iterable[Any], expected: list[Any]) -> bool:
    items = list(actual)
    return len(items) == len(expected) and all(wanted == item for wanted, item in zip(expected, items))
