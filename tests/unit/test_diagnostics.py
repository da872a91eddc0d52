"""Diagnostic rendering tests pinning the failure message layout."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from lib_fluent_expect.domain.diagnostics import FailureDiagnostic, indent

LINES = st.lists(st.text(alphabet="abc xyz-_`:", min_size=1, max_size=8), min_size=1, max_size=5)


def test_expected_and_actual_are_right_aligned() -> None:
    diagnostic = FailureDiagnostic("header", (("expected", "3"), ("actual", "2")))
    assert diagnostic.render() == "header\nexpected: `3`\n  actual: `2`"


def test_labels_align_to_the_longest_label() -> None:
    diagnostic = FailureDiagnostic("header", (("expected", "[1]"), ("actual", "[2]"), ("unmatched", "[1]")))
    assert diagnostic.render().splitlines() == [
        "header",
        " expected: `[1]`",
        "   actual: `[2]`",
        "unmatched: `[1]`",
    ]


def test_diagnostic_without_fields_is_only_the_header() -> None:
    assert FailureDiagnostic("header").render() == "header"


def test_field_lookup() -> None:
    diagnostic = FailureDiagnostic("header", (("expected", "3"),))
    assert diagnostic.field("expected") == "3"
    assert diagnostic.field("actual") is None


def test_str_matches_render() -> None:
    diagnostic = FailureDiagnostic("header", (("actual", "None"),))
    assert str(diagnostic) == diagnostic.render()


@given(LINES)
def test_indent_prefixes_every_line(lines) -> None:
    indented = indent("\n".join(lines))
    assert indented.splitlines() == ["  " + line for line in lines]
