"""Placeholder interpolation: template text -> `Program` (literal and lookup segments)."""
from __future__ import annotations

from dataclasses import dataclass

from mizui.domain.errors import InterpolationError
from mizui.infrastructure.templating.scanner import (
    ComponentToken,
    LiteralToken,
    PlaceholderToken,
    scan,
)
from mizui.infrastructure.templating.syntax import check_syntax


@dataclass(slots=True, frozen=True)
class Text:
    value: str


@dataclass(slots=True, frozen=True)
class Lookup:
    """Value at dotted path `expr` when defined, else the empty string."""

    expr: str


Segment = Text | Lookup


@dataclass(slots=True, frozen=True)
class Program:
    """Fully interpolated template; equal programs share one compiled template."""

    segments: tuple[Segment, ...]

    @property
    def paths(self) -> list[str]:
        seen: dict[str, None] = {}
        for seg in self.segments:
            if isinstance(seg, Lookup):
                seen.setdefault(seg.expr)
        return list(seen)


def interpolate(text: str, identifier: str, open_: str, close: str) -> Program:
    check_syntax(text, identifier, open_, close)
    segments: list[Segment] = []
    for token in scan(text, open_, close):
        if isinstance(token, LiteralToken):
            segments.append(Text(token.text))
        elif isinstance(token, PlaceholderToken):
            if not token.expr:
                raise InterpolationError(
                    f"Empty placeholder {token.raw!r} in {identifier}", identifier=identifier
                )
            segments.append(Lookup(token.expr))
        elif isinstance(token, ComponentToken):
            # left over only when inlining was skipped; rejected by the compiler
            segments.append(Lookup(f"component({token.name})"))
    return Program(tuple(segments))


__all__ = ["Lookup", "Program", "Segment", "Text", "interpolate"]
