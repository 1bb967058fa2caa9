"""Single-pass scanner splitting template text into literal / placeholder / component tokens.

Delimiters are matched as plain substrings. A marker runs from an open delimiter to
the first close delimiter after it on the same line; an open delimiter with no close
on its line is literal text.
"""
from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

_COMPONENT = re.compile(r"component\((.*)\)", re.DOTALL)


@dataclass(slots=True, frozen=True)
class LiteralToken:
    text: str


@dataclass(slots=True, frozen=True)
class PlaceholderToken:
    expr: str  # whitespace-trimmed
    raw: str  # marker as written, delimiters included


@dataclass(slots=True, frozen=True)
class ComponentToken:
    name: str
    raw: str


Token = LiteralToken | PlaceholderToken | ComponentToken


def scan(text: str, open_: str, close: str) -> Iterator[Token]:
    pos = 0
    literal_start = 0
    while True:
        start = text.find(open_, pos)
        if start < 0:
            break
        inner_start = start + len(open_)
        end = text.find(close, inner_start)
        if end < 0:
            break
        inner = text[inner_start:end]
        if "\n" in inner:
            pos = inner_start
            continue
        if start > literal_start:
            yield LiteralToken(text[literal_start:start])
        raw = text[start : end + len(close)]
        expr = inner.strip()
        match = _COMPONENT.fullmatch(expr)
        if match:
            yield ComponentToken(name=match.group(1).strip(), raw=raw)
        else:
            yield PlaceholderToken(expr=expr, raw=raw)
        pos = literal_start = end + len(close)
    if literal_start < len(text):
        yield LiteralToken(text[literal_start:])


__all__ = ["ComponentToken", "LiteralToken", "PlaceholderToken", "Token", "scan"]
