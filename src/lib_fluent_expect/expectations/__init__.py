"""Bundled matcher capabilities.

Each capability is independent; combine the ones you need with
:func:`lib_fluent_expect.make_expect`, or use :func:`lib_fluent_expect.expect`
which offers all of :data:`BUNDLED`.
"""

from __future__ import annotations

from typing import Any, Final

from ..application.builder import Capability
from .boolean import BooleanExpectations, TruthinessExpectations
from .callables import CallableExpectations, RaisesCheck, ReturnsCheck
from .equality import ApproximateExpectations, EqualityExpectations
from .iterables import InAnyOrderCheck, IterableExpectations
from .none import NoneExpectations, PresentCheck
from .order import OrderExpectations
from .predicate import PredicateCheck, PredicateExpectations, SubjectCheck
from .string import StringExpectations

BUNDLED: Final[tuple[type[Capability[Any]], ...]] = (
    EqualityExpectations,
    ApproximateExpectations,
    OrderExpectations,
    BooleanExpectations,
    TruthinessExpectations,
    NoneExpectations,
    PredicateExpectations,
    StringExpectations,
    IterableExpectations,
    CallableExpectations,
)

__all__ = [
    "ApproximateExpectations",
    "BUNDLED",
    "BooleanExpectations",
    "CallableExpectations",
    "EqualityExpectations",
    "InAnyOrderCheck",
    "IterableExpectations",
    "NoneExpectations",
    "OrderExpectations",
    "PredicateCheck",
    "PredicateExpectations",
    "PresentCheck",
    "RaisesCheck",
    "ReturnsCheck",
    "StringExpectations",
    "SubjectCheck",
    "TruthinessExpectations",
]
