"""Runtime settings for diagnostic rendering and logging.

Purpose
-------
Let test suites tune how failures are rendered and how chatty the library is
without touching code: long ``repr`` output can be truncated and passing checks
can be logged for troubleshooting.

Key behaviours
--------------
* Settings bound in the current context (:func:`configure`,
  :func:`settings_override`) win over the environment.
* Environment variables use the ``LIB_FLUENT_EXPECT_`` prefix and the same light
  coercion as the rest of the bitranox tooling (``true``/``false``,
  ``none``/``null``, integers).
* Empty values and ``none``/``null`` leave a setting at its default.
* The environment is read once and cached until :func:`reset`.
* Invalid values raise :class:`~lib_fluent_expect.domain.errors.ConfigurationError`.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from typing import Any, Final, Iterator, Mapping

from .domain.errors import ConfigurationError
from .observability import log_debug

ENV_PREFIX: Final[str] = "LIB_FLUENT_EXPECT_"


@dataclass(frozen=True)
class ExpectSettings:
    """Immutable settings snapshot.

    Attributes
    ----------
    max_repr_length:
        Truncate debug forms longer than this many characters (``...`` is
        appended). ``None`` keeps them intact.
    log_passes:
        Emit an ``expectation_passed`` debug event for every passing check.
    """

    max_repr_length: int | None = None
    log_passes: bool = False

    def __post_init__(self) -> None:
        if self.max_repr_length is not None:
            if isinstance(self.max_repr_length, bool) or not isinstance(self.max_repr_length, int):
                raise ConfigurationError(f"max_repr_length must be an integer or None, got {self.max_repr_length!r}")
            if self.max_repr_length < 1:
                raise ConfigurationError(f"max_repr_length must be positive, got {self.max_repr_length}")
        if not isinstance(self.log_passes, bool):
            raise ConfigurationError(f"log_passes must be a boolean, got {self.log_passes!r}")


DEFAULT_SETTINGS: Final[ExpectSettings] = ExpectSettings()

_BOUND: ContextVar[ExpectSettings | None] = ContextVar("lib_fluent_expect_settings", default=None)


def load_settings(environ: Mapping[str, str] | None = None) -> ExpectSettings:
    """Read settings from environment variables.

    Parameters
    ----------
    environ:
        Mapping to read from. Defaults to :data:`os.environ`.

    Examples
    --------
    >>> load_settings({'LIB_FLUENT_EXPECT_MAX_REPR_LENGTH': '40', 'LIB_FLUENT_EXPECT_LOG_PASSES': 'true'})
    ExpectSettings(max_repr_length=40, log_passes=True)
    >>> load_settings({'LIB_FLUENT_EXPECT_LOG_PASSES': '', 'UNRELATED': '1'})
    ExpectSettings(max_repr_length=None, log_passes=False)
    """

    source = os.environ if environ is None else environ
    known = {field.name for field in fields(ExpectSettings)}
    values: dict[str, Any] = {}
    for key, raw in source.items():
        if not key.startswith(ENV_PREFIX):
            continue
        name = key[len(ENV_PREFIX) :].lower()
        if name not in known:
            continue
        value = _coerce(raw)
        if value is None:
            continue
        values[name] = value
    if not values:
        return DEFAULT_SETTINGS
    settings = ExpectSettings(**values)
    log_debug("settings_loaded", keys=sorted(values))
    return settings


def current_settings() -> ExpectSettings:
    """Return the settings bound in this context, falling back to the environment."""

    bound = _BOUND.get()
    if bound is not None:
        return bound
    return _environment_settings()


@lru_cache(maxsize=1)
def _environment_settings() -> ExpectSettings:
    return load_settings()


def configure(**changes: Any) -> ExpectSettings:
    """Bind settings derived from the current ones for the rest of this context.

    Unknown keys raise :class:`ConfigurationError`.
    """

    settings = _derive(changes)
    _BOUND.set(settings)
    return settings


def reset() -> None:
    """Drop settings bound with :func:`configure` and re-read the environment on next use."""

    _BOUND.set(None)
    _environment_settings.cache_clear()


@contextmanager
def settings_override(**changes: Any) -> Iterator[ExpectSettings]:
    """Temporarily bind changed settings.

    Examples
    --------
    >>> with settings_override(max_repr_length=10) as active:
    ...     active.max_repr_length
    10
    """

    token = _BOUND.set(_derive(changes))
    try:
        yield _BOUND.get() or DEFAULT_SETTINGS
    finally:
        _BOUND.reset(token)


def _derive(changes: Mapping[str, Any]) -> ExpectSettings:
    known = {field.name for field in fields(ExpectSettings)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise ConfigurationError(f"Unknown settings: {', '.join(unknown)}")
    return replace(current_settings(), **changes)


def _coerce(value: str) -> object:
    """Coerce textual environment values to Python primitives where possible.

    Examples
    --------
    >>> _coerce('true'), _coerce('10'), _coerce('none'), _coerce('hello')
    (True, 10, None, 'hello')
    """

    lowered = value.strip().lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if lowered in {"null", "none", ""}:
        return None
    if lowered.isdigit() or (lowered.startswith("-") and lowered[1:].isdigit()):
        return int(lowered)
    return value
