"""Tests for the template scanner."""

from mizui.infrastructure.templating.scanner import (
    ComponentToken,
    LiteralToken,
    PlaceholderToken,
    scan,
)


def test_scan_literal_and_placeholder():
    tokens = list(scan("Hello, {{ name }}!", "{{", "}}"))
    assert tokens == [
        LiteralToken("Hello, "),
        PlaceholderToken(expr="name", raw="{{ name }}"),
        LiteralToken("!"),
    ]


def test_scan_component_reference():
    tokens = list(scan("a{{ component( header ) }}b", "{{", "}}"))
    assert tokens[1] == ComponentToken(name="header", raw="{{ component( header ) }}")


def test_first_close_ends_marker():
    """Markers are non-greedy: the first close delimiter terminates the expression."""
    tokens = list(scan("{{a}} and {{b}}", "{{", "}}"))
    exprs = [t.expr for t in tokens if isinstance(t, PlaceholderToken)]
    assert exprs == ["a", "b"]


def test_unclosed_open_is_literal():
    assert list(scan("price {{ oops", "{{", "}}")) == [LiteralToken("price {{ oops")]


def test_marker_does_not_span_lines():
    tokens = list(scan("{{ a\n}} {{b}}", "{{", "}}"))
    assert tokens == [
        LiteralToken("{{ a\n}} "),
        PlaceholderToken(expr="b", raw="{{b}}"),
    ]


def test_regex_metacharacter_delimiters_are_literal():
    tokens = list(scan("x $(user.name) y (.*)", "$(", ")"))
    assert PlaceholderToken(expr="user.name", raw="$(user.name)") in tokens
    assert tokens[-1] == LiteralToken(" y (.*)")
