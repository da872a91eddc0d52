"""Failure diagnostics rendered when an expectation does not hold.

Purpose
-------
Hold the ephemeral message object built right before the failure signal is
raised: a fixed header describing the check plus labelled debug forms of the
values involved. The module contains no I/O and performs no value formatting of
its own; callers hand in text that was already produced by the debug formatter.

Contents
--------
* :class:`FailureDiagnostic` – header plus ordered ``(label, text)`` fields.
* :func:`indent` – prefix every line of a message with two spaces, used when
  nested failures are reported under their parent.
"""

from __future__ import annotations

from dataclasses import dataclass

INDENT = "  "


@dataclass(frozen=True)
class FailureDiagnostic:
    """Describe one failed check.

    Why
    ----
    Keep the exact layout of failure messages in one place so every capability
    renders the same shape.

    What
    ----
    Labels are right-aligned to the longest label, which makes the canonical
    equality diagnostic read::

        Expectation failed (expected == actual)
        expected: `3`
          actual: `2`

    Attributes
    ----------
    description:
        Fixed, human readable header naming the check.
    fields:
        Ordered ``(label, text)`` pairs. ``text`` is the debug form of a value.

    Examples
    --------
    >>> diagnostic = FailureDiagnostic("Expectation failed (expected == actual)", (("expected", "3"), ("actual", "2")))
    >>> print(diagnostic.render())
    Expectation failed (expected == actual)
    expected: `3`
      actual: `2`
    """

    description: str
    fields: tuple[tuple[str, str], ...] = ()

    def field(self, label: str) -> str | None:
        """Return the text recorded under ``label`` or ``None``."""

        for name, text in self.fields:
            if name == label:
                return text
        return None

    def render(self) -> str:
        if not self.fields:
            return self.description
        width = max(len(label) for label, _ in self.fields)
        lines = [self.description]
        lines.extend(f"{label.rjust(width)}: `{text}`" for label, text in self.fields)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


def indent(message: str) -> str:
    """Prefix every line of ``message`` with two spaces.

    Examples
    --------
    >>> indent("a\\nb")
    '  a\\n  b'
    """

    return "\n".join(INDENT + line for line in message.splitlines())
