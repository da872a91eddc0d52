"""Expectation builders and the capability extension mechanism.

Purpose
-------
Provide the capability-free attachment point matcher operations hang off, plus
the two concrete ways of evaluating what they build:

* :class:`RootExpectation` evaluates every check immediately and raises through
  the failure reporting protocol on the first failure.
* :class:`ExpectationList` records checks and evaluates them later, all at once,
  which is how projections report every nested failure.

Contents
--------
* :class:`ExpectationBuilder` – abstract ``to_pass`` plus projections.
* :class:`Capability` – base class for matcher mixins.
* :class:`RootExpectation` / :class:`ExpectationList` – the builders.
* :class:`ProjectedCheck` – runs nested checks on a derived value.
* :func:`compose` – combine capabilities with a builder base.
* :func:`capabilities_of` – the capability mixins a builder class offers.

System Role
-----------
Capabilities only ever call ``self.to_pass(check)`` and return its result, so the
same matcher works on both builders and third parties can add capabilities
without touching any class defined here.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, ClassVar, Generic, Iterator, Self, TypeVar

from ..domain.errors import CapabilityError
from ..domain.results import CheckResult, combine
from ..observability import log_debug, make_event
from ..settings import current_settings
from .failure import raise_failure
from .ports import Check

T_co = TypeVar("T_co", covariant=True)
U = TypeVar("U")


class ExpectationBuilder(Generic[T_co]):
    """Attachment point for matcher operations on a subject of type ``T_co``.

    Subclasses decide when checks run by implementing :meth:`to_pass`. A subclass
    that does not set ``capabilities`` itself gets every capability found in its
    MRO, so nested lists offer the same matchers as the builder that made them.
    """

    capabilities: ClassVar[tuple[type[Capability[Any]], ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "capabilities" not in cls.__dict__:
            cls.capabilities = capabilities_of(cls)

    def to_pass(self, check: Check[Any]) -> Self:
        """Expect the subject to pass ``check`` and return the builder for chaining."""

        raise NotImplementedError

    def nested(self) -> ExpectationList[Any]:
        """Return an empty expectation list offering this builder's capabilities."""

        return compose(ExpectationList, type(self).capabilities)()

    def projected_by(self, projection: Callable[[T_co], U], configure: Callable[[Any], object]) -> Self:
        """Add expectations on a value derived from the subject.

        ``configure`` receives an empty :class:`ExpectationList` and adds checks
        to it; its return value is ignored.

        Examples
        --------
        >>> from lib_fluent_expect import expect
        >>> _ = expect({"port": 8080}).projected_by(lambda it: it["port"], lambda port: port.to_equal(8080))
        """

        expectations = self.nested()
        configure(expectations)
        return self.to_pass(ProjectedCheck(projection, expectations))


class Capability(ExpectationBuilder[T_co]):
    """Base class for matcher capabilities.

    A capability is a mixin: it defines matcher methods that build a check and
    ``return self.to_pass(check)``. It never overrides :meth:`to_pass`, so it can
    be combined with any builder through :func:`compose` or plain subclassing.
    """

    capabilities = ()


def capabilities_of(cls: type) -> tuple[type[Capability[Any]], ...]:
    """Return the capability mixins in the MRO of ``cls``, nearest first.

    Builders mixing in capabilities (such as subclasses of the bundled
    expectations) are skipped: only classes that leave :meth:`to_pass` abstract
    count as capabilities.

    Examples
    --------
    >>> from lib_fluent_expect.expectations import EqualityExpectations
    >>> capabilities_of(compose(RootExpectation, (EqualityExpectations,)))
    (<class 'lib_fluent_expect.expectations.equality.EqualityExpectations'>,)
    """

    return tuple(
        klass
        for klass in cls.__mro__
        if isinstance(klass, type)
        and issubclass(klass, Capability)
        and klass is not Capability
        and klass.to_pass is ExpectationBuilder.to_pass
    )


class RootExpectation(ExpectationBuilder[T_co]):
    """Wrap a subject and evaluate every check as soon as it is added.

    Why
    ----
    An unmet expectation must abort the test at the line that stated it.

    What
    ----
    Owns ``subject`` for its (short) lifetime. Passing checks return the wrapper
    so further matchers can be chained; a failing check raises
    :class:`~lib_fluent_expect.domain.errors.ExpectationFailed`.
    """

    def __init__(self, subject: T_co) -> None:
        self._subject = subject

    @property
    def subject(self) -> T_co:
        return self._subject

    def to_pass(self, check: Check[Any]) -> Self:
        __tracebackhide__ = True
        result = check.check(self._subject)
        if result.failed:
            raise_failure(result, capability=type(self).__name__, check=type(check).__name__)
        if current_settings().log_passes:
            log_debug("expectation_passed", **make_event(type(self).__name__, type(check).__name__))
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._subject!r})"


class ExpectationList(ExpectationBuilder[T_co]):
    """Deferred builder that collects checks and evaluates them together.

    The list is itself a :class:`~lib_fluent_expect.application.ports.Check`,
    so lists nest inside projections and inside other lists.
    """

    def __init__(self) -> None:
        self._checks: list[Check[Any]] = []

    def to_pass(self, check: Check[Any]) -> Self:
        self._checks.append(check)
        return self

    def check(self, subject: Any) -> CheckResult:
        """Run every collected check against ``subject`` and merge the results."""

        return combine([check.check(subject) for check in self._checks])

    def __len__(self) -> int:
        return len(self._checks)

    def __iter__(self) -> Iterator[Check[Any]]:
        return iter(self._checks)


@dataclass(frozen=True)
class ProjectedCheck(Generic[U]):
    """Apply ``projection`` to the subject and run nested expectations on the result.

    Failures are indented by two spaces under the parent diagnostic.
    """

    projection: Callable[[Any], U]
    expectations: Check[U]

    def check(self, subject: Any) -> CheckResult:
        return self.expectations.check(self.projection(subject)).indented()


def compose(base: type[ExpectationBuilder[Any]], capabilities: tuple[type, ...]) -> type[Any]:
    """Return a class combining ``capabilities`` with the builder ``base``.

    Duplicates are dropped (first occurrence wins); the resulting classes are
    cached so repeated calls return the same type.

    Raises
    ------
    CapabilityError
        When an entry is not a :class:`Capability` subclass.

    Examples
    --------
    >>> from lib_fluent_expect.expectations import EqualityExpectations
    >>> cls = compose(RootExpectation, (EqualityExpectations,))
    >>> cls(2).to_equal(2).subject
    2
    """

    for capability in capabilities:
        if not (isinstance(capability, type) and issubclass(capability, Capability)):
            raise CapabilityError(f"{capability!r} is not a Capability subclass")
    return _compose(base, tuple(dict.fromkeys(capabilities)))


@lru_cache(maxsize=None)
def _compose(base: type[ExpectationBuilder[Any]], capabilities: tuple[type, ...]) -> type[Any]:
    if not capabilities:
        return base
    name = f"{base.__name__}[{', '.join(capability.__name__ for capability in capabilities)}]"
    return type(name, (*capabilities, base), {"capabilities": capabilities, "__module__": __name__})
