"""Application-layer ports describing the extension contracts.

Purpose
-------
Define the structural contracts that matcher capabilities and subject values
must satisfy, so builders can evaluate checks without depending on concrete
matcher implementations.

Contents
--------
* :class:`Check` – an evaluable expectation on a subject.
* :class:`SupportsDebug` – the debug formatter contract (``repr``).
* :class:`SupportsOrdering` – subjects usable with the order capability.

System Role
-----------
Capabilities build objects implementing :class:`Check`; builders only ever call
``check(subject)``. The remaining protocols are used as ``self`` bounds so type
checkers reject matcher calls on ineligible subject types.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from ..domain.results import CheckResult

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Check(Protocol[T_contra]):
    """Evaluate one expectation against a subject.

    Why
    ----
    Separate *what* is expected (built by a capability) from *when* it is
    evaluated (decided by the builder).
    """

    def check(self, subject: T_contra) -> CheckResult:
        """Return a passing or failing :class:`CheckResult` for ``subject``."""
        ...


class SupportsDebug(Protocol):
    """Values that render a textual debug form.

    Every Python object satisfies it through :func:`repr`; it exists to name the
    contract in signatures.
    """

    def __repr__(self) -> str: ...


class SupportsOrdering(Protocol):
    """Values supporting the rich comparison operators."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...

    def __ge__(self, other: Any, /) -> bool: ...
