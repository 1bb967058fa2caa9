"""Tests for the per-line delimiter balance check."""

import pytest

from mizui.domain.errors import ErrorKind, TemplateSyntaxError
from mizui.infrastructure.templating.syntax import check_syntax


def test_balanced_lines_pass():
    check_syntax("Hello {{ a }}\n{{b}} and {{ c }}\nplain", "t.mizui", "{{", "}}")


def test_missing_close_reports_line_number():
    text = "ok {{ a }}\nstill ok\nbroken {{ name\nalso {{ broken"
    with pytest.raises(TemplateSyntaxError) as exc:
        check_syntax(text, "page.mizui", "{{", "}}")
    assert exc.value.line == 3
    assert exc.value.kind is ErrorKind.SYNTAX
    assert str(exc.value) == "Syntax Error in page.mizui at Line 3: Missing '}}'"


def test_extra_close_names_close_delimiter():
    with pytest.raises(TemplateSyntaxError) as exc:
        check_syntax("a }}", "t", "{{", "}}")
    assert exc.value.line == 1
    assert "Unexpected '}}'" in str(exc.value)


def test_single_character_delimiters():
    with pytest.raises(TemplateSyntaxError) as exc:
        check_syntax("{name}\n{name", "t", "{", "}")
    assert exc.value.line == 2


def test_close_before_open_is_accepted():
    """Only counts are compared per line; ordering is deliberately not checked."""
    check_syntax("}} name {{", "t", "{{", "}}")
    check_syntax("}} open {{ name }} close {{", "t", "{{", "}}")
