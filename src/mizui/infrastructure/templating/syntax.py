"""Per-line delimiter balance check run before interpolation."""
from __future__ import annotations

from mizui.domain.errors import TemplateSyntaxError


def check_syntax(text: str, identifier: str, open_: str, close: str) -> None:
    """Raise `TemplateSyntaxError` for the first line whose delimiter counts differ.

    Only counts are compared, not ordering: `}} x {{` balances and is accepted.
    """
    for lineno, line in enumerate(text.split("\n"), start=1):
        opens = line.count(open_)
        closes = line.count(close)
        if opens == closes:
            continue
        if opens > closes:
            detail = f"Missing '{close}'"
        else:
            detail = f"Unexpected '{close}' without '{open_}'"
        raise TemplateSyntaxError(
            f"Syntax Error in {identifier} at Line {lineno}: {detail}",
            identifier=identifier,
            line=lineno,
        )


__all__ = ["check_syntax"]
